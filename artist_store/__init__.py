#!/usr/bin/env python3
"""
Artist Store Package

A data-access layer for artist profiles, their images, availability
schedules and bookings, backed by PostgreSQL.

This package provides the ArtistStore facade, connection pool management,
schema-driven configuration and a small command-line interface.
"""

__version__ = "1.0.0"
__author__ = "Artist Store"
__description__ = "Data-access layer for artist profiles, schedules and bookings"
__license__ = "MIT"

# Import models for public API
from .models import (
    ArtistSummary,
    ArtistDetail,
    ScheduleEntry,
    BookingEntry,
    DatabaseConfig,
    StoreFailure,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_NOT_FOUND,
    EXIT_CONFIG_ERROR,
    EXIT_DATABASE_ERROR,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
    DEFAULT_POOL_SIZE,
    DEFAULT_MAX_OVERFLOW,
    DEFAULT_CONNECTION_TIMEOUT,
)

# Import database functions for public API
from .database import (
    ArtistStore,
    PoolConnectionProvider,
    create_db_connection_pool,
    close_db_connection_pool,
    create_database_config,
    validate_database_url,
)

# Import CLI functionality for public API
from .cli import (
    main,
    create_argument_parser,
)

# Import utilities for public API
from .utils import (
    setup_logging,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "ArtistSummary",
    "ArtistDetail",
    "ScheduleEntry",
    "BookingEntry",
    "DatabaseConfig",
    "StoreFailure",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_NOT_FOUND",
    "EXIT_CONFIG_ERROR",
    "EXIT_DATABASE_ERROR",
    "EXIT_INTERRUPTED",
    "EXIT_UNEXPECTED_ERROR",
    "DEFAULT_POOL_SIZE",
    "DEFAULT_MAX_OVERFLOW",
    "DEFAULT_CONNECTION_TIMEOUT",
    # Database
    "ArtistStore",
    "PoolConnectionProvider",
    "create_db_connection_pool",
    "close_db_connection_pool",
    "create_database_config",
    "validate_database_url",
    # CLI functions
    "main",
    "create_argument_parser",
    # Utilities
    "setup_logging",
]
