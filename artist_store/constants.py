#!/usr/bin/env python3
"""
Application Constants

This module contains configuration constants and exit codes used
throughout the artist store.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_NOT_FOUND = 2
EXIT_CONFIG_ERROR = 3
EXIT_DATABASE_ERROR = 4
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Database connection pool constants
DEFAULT_POOL_SIZE = 4
DEFAULT_MAX_OVERFLOW = 8  # Allow burst connections
DEFAULT_CONNECTION_TIMEOUT = 30  # seconds

# Days added to schedule dates on the display read path
SCHEDULE_DISPLAY_DAY_OFFSET = 1
