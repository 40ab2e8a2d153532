#!/usr/bin/env python3
"""
Data Models Module

This module contains all data structures returned by the artist store
and the configuration/result types used by the database layer.
"""

from .artist import ArtistSummary, ArtistDetail
from .schedule import ScheduleEntry, BookingEntry
from .database import DatabaseConfig, StoreFailure

__all__ = [
    "ArtistSummary",
    "ArtistDetail",
    "ScheduleEntry",
    "BookingEntry",
    "DatabaseConfig",
    "StoreFailure",
]
