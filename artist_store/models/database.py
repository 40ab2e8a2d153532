#!/usr/bin/env python3
"""
Database Models

This module contains data structures related to database configuration
and failure records emitted by store operations.
"""

from typing import Any, Dict, NamedTuple


class DatabaseConfig(NamedTuple):
    """
    Database configuration settings.

    Attributes:
        url: Database connection URL
        pool_size: Number of connections in the pool
        max_overflow: Maximum overflow connections beyond pool_size
        connection_timeout: Timeout for getting connections (seconds)
    """

    url: str
    pool_size: int = 4
    max_overflow: int = 8
    connection_timeout: int = 30  # seconds


class StoreFailure(NamedTuple):
    """
    Context captured when a store operation fails.

    The record is handed to the logging sink; the original exception is
    still raised to the caller, who decides whether to retry.

    Attributes:
        operation: Store method that failed
        artist_id: Artist the operation targeted
        parameters: Statement parameters, rendered as strings
        error_class: Exception class name
        error_message: Exception message
        error_type: "permanent", "transient" or "systemic"
        timestamp: Failure time (epoch seconds)
    """

    operation: str
    artist_id: int
    parameters: Dict[str, Any]
    error_class: str
    error_message: str
    error_type: str
    timestamp: float

    def to_dict(self) -> Dict[str, Any]:
        return self._asdict()
