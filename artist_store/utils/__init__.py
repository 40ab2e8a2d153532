"""
Utilities module for the artist store.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup
- Structured failure logging for store operations
"""

from .logging import setup_logging, log_store_failure

__all__ = [
    "setup_logging",
    "log_store_failure",
]
