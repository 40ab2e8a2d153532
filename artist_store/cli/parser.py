"""
CLI argument parser module.

Global options are generated from the configuration schema; each store
operation is exposed as a sub-command.
"""

from argparse import ArgumentParser
from datetime import date, time

from ..config.loader import ConfigLoader


def create_argument_parser() -> ArgumentParser:
    """Create and configure the argument parser."""
    parser = ArgumentParser(
        prog="artist-store",
        description="Query and maintain artist profiles, schedules and bookings",
        epilog="""
Examples:
  artist-store top --limit 10
  artist-store detail 42
  artist-store add-schedule 42 2024-01-10 2024-01-12 09:00 17:00
  artist-store update 42 --description "new bio" --image u1 --image u2
        """,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )
    ConfigLoader.add_schema_arguments(parser)

    commands = parser.add_subparsers(dest="command", required=True)

    top = commands.add_parser("top", help="List top artists with one image each")
    top.add_argument("--limit", type=int, default=10, help="Maximum artists to list (default: 10)")

    detail = commands.add_parser("detail", help="Show an artist with all images")
    detail.add_argument("artist_id", type=int)

    schedule = commands.add_parser("schedule", help="Show an artist's availability")
    schedule.add_argument("artist_id", type=int)
    schedule.add_argument(
        "--raw",
        action="store_true",
        help="Show dates as stored, suitable for editing",
    )

    booking = commands.add_parser("booking", help="Show bookings starting on a date")
    booking.add_argument("artist_id", type=int)
    booking.add_argument("date", type=date.fromisoformat)

    add = commands.add_parser("add-schedule", help="Add an availability window")
    add.add_argument("artist_id", type=int)
    add.add_argument("start_date", type=date.fromisoformat)
    add.add_argument("end_date", type=date.fromisoformat)
    add.add_argument("start_time", type=time.fromisoformat)
    add.add_argument("end_time", type=time.fromisoformat)

    delete = commands.add_parser("delete-schedule", help="Remove an availability window")
    delete.add_argument("artist_id", type=int)
    delete.add_argument("date", type=date.fromisoformat)
    delete.add_argument("start_time", type=time.fromisoformat)

    update = commands.add_parser("update", help="Replace description and images")
    update.add_argument("artist_id", type=int)
    update.add_argument("--description", required=True)
    update.add_argument(
        "--image",
        dest="images",
        action="append",
        default=[],
        help="Image URL (repeat for several images)",
    )

    return parser
