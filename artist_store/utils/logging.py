"""
Logging utilities for the artist store.

This module provides centralized logging configuration and the structured
failure record emitted when a store operation fails.
"""

import json
import logging
from typing import Optional

from ..models import StoreFailure


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # Set specific logger levels
    logging.getLogger("psycopg").setLevel(logging.WARNING)
    logging.getLogger("psycopg.pool").setLevel(logging.WARNING)


def log_store_failure(
    failure: StoreFailure,
    error: Optional[BaseException] = None,
    logger: Optional[logging.Logger] = None,
):
    """
    Log a structured record for a failed store operation.

    The record is machine-readable so log processors can alert on it without
    parsing the traceback. The caller remains responsible for re-raising.

    Args:
        failure: Context captured for the failed operation
        error: Exception that caused the failure, attached as exc_info
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    failure_record = {"event_type": "store_failure", **failure.to_dict()}

    logger.error(
        f"STORE_FAILURE: {json.dumps(failure_record, ensure_ascii=False, default=str)}",
        exc_info=error,
    )
