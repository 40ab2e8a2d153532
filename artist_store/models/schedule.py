#!/usr/bin/env python3
"""
Schedule and Booking Models

Availability windows and committed bookings share the same date/time range
shape; schedule entries additionally carry their row and artist identifiers.
"""

from datetime import date, time
from typing import Any, Dict, NamedTuple, Optional, Union


def _iso(value: Union[date, time, str, None]) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return value.isoformat()


class ScheduleEntry(NamedTuple):
    """
    An artist's availability window.

    Attributes:
        id: Schedule row identifier
        artist_id: Owning artist
        start_date: First day of the window
        end_date: Last day of the window
        start_time: Daily start time
        end_time: Daily end time
    """

    id: int
    artist_id: int
    start_date: date
    end_date: date
    start_time: time
    end_time: time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "artist_id": self.artist_id,
            "start_date": _iso(self.start_date),
            "end_date": _iso(self.end_date),
            "start_time": _iso(self.start_time),
            "end_time": _iso(self.end_time),
        }


class BookingEntry(NamedTuple):
    """A committed booking window for an artist."""

    start_date: date
    end_date: date
    start_time: time
    end_time: time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_date": _iso(self.start_date),
            "end_date": _iso(self.end_date),
            "start_time": _iso(self.start_time),
            "end_time": _iso(self.end_time),
        }
