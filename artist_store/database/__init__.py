#!/usr/bin/env python3
"""
Database package for the artist store.

This package provides database connection management, configuration,
the ArtistStore operations, and utilities.
"""

from .connection import (
    create_db_connection_pool,
    get_db_connection,
    release_db_connection,
    close_db_connection_pool,
    PoolConnectionProvider,
)

from .config import (
    validate_database_url,
    create_database_config,
)

from .operations import (
    ArtistStore,
    group_artist_rows,
)

from .utils import (
    classify_database_error,
)

__all__ = [
    # Connection management
    "create_db_connection_pool",
    "get_db_connection",
    "release_db_connection",
    "close_db_connection_pool",
    "PoolConnectionProvider",
    # Configuration
    "validate_database_url",
    "create_database_config",
    # Operations
    "ArtistStore",
    "group_artist_rows",
    # Utilities
    "classify_database_error",
]
