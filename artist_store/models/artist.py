#!/usr/bin/env python3
"""
Artist Data Models

This module contains the response shapes produced by the artist list and
detail queries.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, NamedTuple, Optional


def _json_value(value: Any) -> Any:
    """Convert database values (dates, decimals) into JSON-safe values."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


class ArtistSummary(NamedTuple):
    """
    One row of the top-artists listing.

    Attributes:
        id: Artist identifier
        image: Representative image URL (lexically first image of the artist)
        category: Artist category
        job: Job title
        rating: Rating as stored
        description: Free-text description
        address: Postal address
        full_name: Display name
        dob: Date of birth
        phone: Contact phone number
    """

    id: int
    image: str
    category: Optional[str] = None
    job: Optional[str] = None
    rating: Optional[Any] = None
    description: Optional[str] = None
    address: Optional[str] = None
    full_name: Optional[str] = None
    dob: Optional[date] = None
    phone: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {key: _json_value(value) for key, value in self._asdict().items()}


class ArtistDetail(NamedTuple):
    """
    Full artist profile with every associated image URL.

    Attributes:
        id: Artist identifier
        full_name: Display name
        job: Job title
        address: Postal address
        category: Artist category
        description: Free-text description
        phone: Contact phone number
        rating: Rating as stored
        dob: Date of birth
        images: Image URLs in the order the store returned them
    """

    id: int
    full_name: Optional[str]
    job: Optional[str]
    address: Optional[str]
    category: Optional[str]
    description: Optional[str]
    phone: Optional[str]
    rating: Optional[Any]
    dob: Optional[date]
    images: List[str]

    def to_dict(self) -> Dict[str, Any]:
        data = {key: _json_value(value) for key, value in self._asdict().items()}
        data["images"] = list(self.images)
        return data
