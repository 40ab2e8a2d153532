"""
CLI main application module.

This module contains the main entry point: it loads configuration, opens
the connection pool, runs one store operation and prints the result as JSON.
"""

import json
import logging
import sys
from typing import Any, Callable, Dict

import psycopg

from ..constants import (
    EXIT_SUCCESS,
    EXIT_NOT_FOUND,
    EXIT_CONFIG_ERROR,
    EXIT_DATABASE_ERROR,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
)

from ..database import (
    ArtistStore,
    PoolConnectionProvider,
    classify_database_error,
    create_database_config,
    create_db_connection_pool,
    close_db_connection_pool,
)

from ..config import Env, ConfigError
from ..utils import setup_logging
from .parser import create_argument_parser

logger = logging.getLogger(__name__)


def _top(store: ArtistStore, args) -> Any:
    return [artist.to_dict() for artist in store.list_top(args.limit)]


def _detail(store: ArtistStore, args) -> Any:
    artist = store.detail(args.artist_id)
    return artist.to_dict() if artist else None


def _schedule(store: ArtistStore, args) -> Any:
    if args.raw:
        entries = store.get_artist_schedule_to_update(args.artist_id)
    else:
        entries = store.get_artist_schedule(args.artist_id)
    return [entry.to_dict() for entry in entries]


def _booking(store: ArtistStore, args) -> Any:
    return [entry.to_dict() for entry in store.get_artist_booking(args.artist_id, args.date)]


def _add_schedule(store: ArtistStore, args) -> Any:
    rows = store.add_artist_schedule(
        args.artist_id, args.start_date, args.end_date, args.start_time, args.end_time
    )
    return {"rows_affected": rows}


def _delete_schedule(store: ArtistStore, args) -> Any:
    rows = store.delete_artist_schedule(args.artist_id, args.date, args.start_time)
    return {"rows_affected": rows}


def _update(store: ArtistStore, args) -> Any:
    store.update(args.artist_id, args.description, args.images)
    return {"artist_id": args.artist_id, "images": len(args.images)}


COMMANDS: Dict[str, Callable[[ArtistStore, Any], Any]] = {
    "top": _top,
    "detail": _detail,
    "schedule": _schedule,
    "booking": _booking,
    "add-schedule": _add_schedule,
    "delete-schedule": _delete_schedule,
    "update": _update,
}


def run_command(store: ArtistStore, args) -> Any:
    """Dispatch the parsed sub-command to the store and return a JSON-safe result."""
    return COMMANDS[args.command](store, args)


def main(argv=None):
    """Main entry point for the script."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        env = Env.load(cli_args=args)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    logger.debug(f"Configuration: {env.mask()}")

    db_config = create_database_config(
        url=env.DATABASE_URL,
        pool_size=env.DB_POOL_SIZE,
        max_overflow=env.DB_MAX_OVERFLOW,
        connection_timeout=env.DB_CONNECTION_TIMEOUT,
    )
    if db_config is None:
        logger.error("Invalid database configuration")
        sys.exit(EXIT_CONFIG_ERROR)

    db_pool = None
    try:
        db_pool = create_db_connection_pool(db_config)
        store = ArtistStore(
            PoolConnectionProvider(db_pool),
            atomic_updates=env.ATOMIC_UPDATES,
        )
        result = run_command(store, args)
    except psycopg.Error as e:
        logger.error(f"Database error ({classify_database_error(e)}): {e}")
        sys.exit(EXIT_DATABASE_ERROR)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)
    finally:
        if db_pool is not None:
            close_db_connection_pool(db_pool)

    if result is None:
        logger.error(f"Artist {args.artist_id} not found")
        sys.exit(EXIT_NOT_FOUND)

    print(json.dumps(result, indent=2, ensure_ascii=False))
    sys.exit(EXIT_SUCCESS)
