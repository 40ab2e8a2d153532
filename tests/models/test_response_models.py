#!/usr/bin/env python3
"""
Tests for the response models' JSON conversion.
"""

import json
import unittest
from datetime import date, time
from decimal import Decimal

from artist_store.models import ArtistDetail, ArtistSummary, BookingEntry, ScheduleEntry


class TestResponseModels(unittest.TestCase):
    def test_summary_to_dict(self):
        summary = ArtistSummary(
            id=1, image="a.jpg", category="music", job="Singer", rating=Decimal("4.5"),
            description="bio", address="addr", full_name="Ana", dob=date(1990, 5, 17), phone="555",
        )

        data = summary.to_dict()

        self.assertEqual(data["dob"], "1990-05-17")
        self.assertEqual(data["rating"], 4.5)
        self.assertEqual(data["full_name"], "Ana")
        json.dumps(data)

    def test_detail_to_dict_copies_images(self):
        detail = ArtistDetail(
            id=1, full_name="Ana", job=None, address=None, category=None, description=None,
            phone=None, rating=None, dob=None, images=["u1", "u2"],
        )

        data = detail.to_dict()
        data["images"].append("u3")

        self.assertEqual(detail.images, ["u1", "u2"])
        self.assertIsNone(data["dob"])

    def test_schedule_and_booking_to_dict(self):
        entry = ScheduleEntry(3, 1, date(2024, 1, 10), date(2024, 1, 12), time(9, 0), time(17, 0))
        booking = BookingEntry("2024-02-01", "2024-02-01", time(18, 0), time(20, 0))

        self.assertEqual(
            entry.to_dict(),
            {
                "id": 3,
                "artist_id": 1,
                "start_date": "2024-01-10",
                "end_date": "2024-01-12",
                "start_time": "09:00:00",
                "end_time": "17:00:00",
            },
        )
        self.assertEqual(booking.to_dict()["start_date"], "2024-02-01")
        self.assertEqual(booking.to_dict()["end_time"], "20:00:00")


if __name__ == "__main__":
    unittest.main()
