"""
Database utilities module.

This module provides error classification for failures raised by the
backing store.
"""


def classify_database_error(exception: Exception) -> str:
    """
    Classify database errors into permanent, transient, or systemic categories.

    Args:
        exception: Database exception to classify

    Returns:
        Error type: "permanent", "transient", or "systemic"
    """
    error_str = str(exception).lower()

    # Bad input or schema mismatch
    permanent_indicators = [
        "constraint violation",
        "foreign key constraint",
        "check constraint",
        "not null violation",
        "duplicate key",
        "invalid input syntax",
        "must not be negative",
        "relation does not exist",
        "column does not exist",
    ]

    for indicator in permanent_indicators:
        if indicator in error_str:
            return "permanent"

    # Credentials or environment are wrong
    systemic_indicators = [
        "authentication failed",
        "permission denied",
        "role does not exist",
        "database does not exist",
        "ssl required",
        "password authentication failed",
    ]

    for indicator in systemic_indicators:
        if indicator in error_str:
            return "systemic"

    # Connection timeouts, network blips, deadlocks, etc.
    return "transient"
