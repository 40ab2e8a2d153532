"""
Database operations module.

This module holds ArtistStore, the data-access facade for artists, their
images, availability schedules and bookings. Each method borrows one scoped
connection from the injected provider, runs its statements and maps the
rows into the response models.
"""

import logging
import time
from datetime import date, time as dt_time, timedelta
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..constants import SCHEDULE_DISPLAY_DAY_OFFSET
from ..models import (
    ArtistDetail,
    ArtistSummary,
    BookingEntry,
    ScheduleEntry,
    StoreFailure,
)
from ..utils.logging import log_store_failure
from . import queries
from .utils import classify_database_error

logger = logging.getLogger(__name__)

DateArg = Union[date, str]
TimeArg = Union[dt_time, str]


def group_artist_rows(rows: Iterable[Sequence[Any]]) -> List[ArtistDetail]:
    """
    Fold artist/image join rows into one ArtistDetail per artist id.

    Each row carries the nine profile columns followed by one image URL.
    Artists keep the order in which they first appear; images keep row order.
    """
    grouped: Dict[Any, ArtistDetail] = {}
    for row in rows:
        artist_id = row[0]
        if artist_id not in grouped:
            grouped[artist_id] = ArtistDetail(
                id=row[0],
                full_name=row[1],
                job=row[2],
                address=row[3],
                category=row[4],
                description=row[5],
                phone=row[6],
                rating=row[7],
                dob=row[8],
                images=[],
            )
        grouped[artist_id].images.append(row[9])
    return list(grouped.values())


def _row_to_summary(row: Sequence[Any]) -> ArtistSummary:
    return ArtistSummary(
        id=row[0],
        image=row[1],
        category=row[2],
        job=row[3],
        rating=row[4],
        description=row[5],
        address=row[6],
        full_name=row[7],
        dob=row[8],
        phone=row[9],
    )


def _row_to_schedule(row: Sequence[Any], day_offset: int = 0) -> ScheduleEntry:
    shift = timedelta(days=day_offset)
    return ScheduleEntry(
        id=row[0],
        artist_id=row[1],
        start_date=row[2] + shift if day_offset and row[2] is not None else row[2],
        end_date=row[3] + shift if day_offset and row[3] is not None else row[3],
        start_time=row[4],
        end_time=row[5],
    )


def _row_to_booking(row: Sequence[Any]) -> BookingEntry:
    return BookingEntry(
        start_date=row[0],
        end_date=row[1],
        start_time=row[2],
        end_time=row[3],
    )


class ArtistStore:
    """
    Stateless data-access facade for the artist entity.

    Args:
        provider: Object exposing a ``connection()`` context manager that
            yields a psycopg connection and releases it on exit
        logger: Sink for failure records (defaults to this module's logger)
        atomic_updates: Run the three statements of ``update`` in a single
            transaction. Off by default: each statement is committed on its
            own, so a failure part way through can leave an artist without
            images.
    """

    def __init__(
        self,
        provider,
        logger: Optional[logging.Logger] = None,
        atomic_updates: bool = False,
    ):
        self.provider = provider
        self.logger = logger or logging.getLogger(__name__)
        self.atomic_updates = atomic_updates

    def list_top(self, limit: int) -> List[ArtistSummary]:
        """Return up to ``limit`` artists, each with one representative image."""
        with self.provider.connection() as conn:
            with conn.cursor() as cur:
                self.logger.debug(f"Listing top {limit} artists")
                cur.execute(queries.LIST_TOP_ARTISTS, (limit,))
                return [_row_to_summary(row) for row in cur.fetchall()]

    def detail(self, artist_id: int) -> Optional[ArtistDetail]:
        """
        Return the artist's profile and all of its image URLs.

        Returns None when the artist does not exist or has no image rows.
        """
        with self.provider.connection() as conn:
            with conn.cursor() as cur:
                self.logger.debug(f"Loading detail for artist {artist_id}")
                cur.execute(queries.ARTIST_DETAIL, (artist_id,))
                rows = cur.fetchall()

        artists = group_artist_rows(rows)
        return artists[0] if artists else None

    def get_artist_schedule(self, artist_id: int) -> List[ScheduleEntry]:
        """Return schedule entries with both dates shifted one day forward."""
        return self._read_schedule(artist_id, day_offset=SCHEDULE_DISPLAY_DAY_OFFSET)

    def get_artist_schedule_to_update(self, artist_id: int) -> List[ScheduleEntry]:
        """Return schedule entries exactly as stored."""
        return self._read_schedule(artist_id, day_offset=0)

    def _read_schedule(self, artist_id: int, day_offset: int) -> List[ScheduleEntry]:
        with self.provider.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(queries.ARTIST_SCHEDULE, (artist_id,))
                return [_row_to_schedule(row, day_offset) for row in cur.fetchall()]

    def get_artist_booking(self, artist_id: int, start_date: DateArg) -> List[BookingEntry]:
        """Return bookings for the artist starting exactly on ``start_date``."""
        with self.provider.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(queries.ARTIST_BOOKING, (start_date, artist_id))
                return [_row_to_booking(row) for row in cur.fetchall()]

    def update(self, artist_id: int, description: str, images: Sequence[str]) -> None:
        """
        Overwrite the description and replace the whole image set.

        Existing image rows are deleted, then one row per URL in ``images``
        is inserted.
        """
        with self.provider.connection() as conn:
            if self.atomic_updates:
                with conn.transaction():
                    self._replace_profile(conn, artist_id, description, images)
            else:
                self._replace_profile(conn, artist_id, description, images, commit_each=True)

        self.logger.debug(f"Updated artist {artist_id} with {len(images)} images")

    def _replace_profile(
        self,
        conn,
        artist_id: int,
        description: str,
        images: Sequence[str],
        commit_each: bool = False,
    ) -> None:
        with conn.cursor() as cur:
            cur.execute(queries.UPDATE_DESCRIPTION, (description, artist_id))
            if commit_each:
                conn.commit()

            cur.execute(queries.DELETE_IMAGES, (artist_id,))
            if commit_each:
                conn.commit()

            for image_url in images:
                cur.execute(queries.INSERT_IMAGE, (artist_id, image_url))
                if commit_each:
                    conn.commit()

    def delete_artist_schedule(self, artist_id: int, date: DateArg, start_time: TimeArg) -> int:
        """
        Delete the schedule rows matching artist, start date and start time.

        Returns:
            Number of rows removed
        """
        try:
            with self.provider.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(queries.DELETE_SCHEDULE, (artist_id, date, start_time))
                    return cur.rowcount
        except Exception as e:
            self._record_failure(
                "delete_artist_schedule",
                artist_id,
                {"date": date, "start_time": start_time},
                e,
            )
            raise

    def add_artist_schedule(
        self,
        artist_id: int,
        start_date: DateArg,
        end_date: DateArg,
        start_time: TimeArg,
        end_time: TimeArg,
    ) -> int:
        """
        Insert one availability window for the artist.

        Returns:
            Number of rows inserted
        """
        try:
            with self.provider.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        queries.INSERT_SCHEDULE,
                        (artist_id, start_date, end_date, start_time, end_time),
                    )
                    return cur.rowcount
        except Exception as e:
            self._record_failure(
                "add_artist_schedule",
                artist_id,
                {
                    "start_date": start_date,
                    "end_date": end_date,
                    "start_time": start_time,
                    "end_time": end_time,
                },
                e,
            )
            raise

    def _record_failure(
        self,
        operation: str,
        artist_id: int,
        parameters: Dict[str, Any],
        error: Exception,
    ) -> StoreFailure:
        failure = StoreFailure(
            operation=operation,
            artist_id=artist_id,
            parameters={key: str(value) for key, value in parameters.items()},
            error_class=type(error).__name__,
            error_message=str(error),
            error_type=classify_database_error(error),
            timestamp=time.time(),
        )
        log_store_failure(failure, error, logger=self.logger)
        return failure
