"""
Command-line interface for yearcal.

Prints a plain-text calendar for a year, or the year's dates as a table.
"""

from __future__ import annotations

import argparse
import sys
from datetime import MAXYEAR

from yearcal import __version__
from yearcal.calendar import render_calendar
from yearcal.config import get_default_months_per_line
from yearcal.dates import dates
from yearcal.logging import configure_logging, get_logger

_log = get_logger(__name__)

# dates(year) ends on January 1st of the following year
MAX_YEAR = MAXYEAR - 1


def positive_int(value: str) -> int:
    """argparse type accepting strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def calendar_year(value: str) -> int:
    """argparse type accepting years that datetime.date can represent in full."""
    year = positive_int(value)
    if year > MAX_YEAR:
        raise argparse.ArgumentTypeError(f"year must be at most {MAX_YEAR}, got {year}")
    return year


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="yearcal",
        description="Print a plain-text calendar for a year",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("year", type=calendar_year, help="Calendar year to print")
    parser.add_argument(
        "--months-per-line",
        type=positive_int,
        default=None,
        help="Number of months per line (default: configured value)",
    )
    parser.add_argument(
        "--table",
        choices=["pandas", "polars"],
        default=None,
        help="Print the year's dates as a DataFrame using this backend",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON",
    )
    return parser


def cmd_calendar(args: argparse.Namespace) -> int:
    """Print the text calendar."""
    months_per_line = args.months_per_line or get_default_months_per_line()
    print(render_calendar(args.year, months_per_line))
    return 0


def cmd_table(args: argparse.Namespace) -> int:
    """Print the year's dates as a DataFrame."""
    df = dates(args.year).to_frame(backend=args.table)
    print(df)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, json_output=args.json_logs)
    _log.info("cli_invoked", year=args.year, table=args.table)

    if args.table is not None:
        return cmd_table(args)
    return cmd_calendar(args)


if __name__ == "__main__":
    sys.exit(main())
