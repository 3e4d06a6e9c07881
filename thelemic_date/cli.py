"""Command line entry point: ``tdate``."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import __version__, astro_engine, output
from .errors import ThelemicDateError
from .liber_oz import LIBER_OZ
from .reckoning import thelemic_date_at, thelemic_date_now

DEFAULT_LOCATION = "Las Vegas, NV"
DATETIME_FIELDS = ["YEAR", "MONTH", "DAY", "HOUR", "MINUTE", "LOCATION"]

VERSION_TEXT = f"""\
%(prog)s {__version__}
93 93/93
Do what thou wilt shall be the whole of the Law.
Love is the law, love under will.

Thanks to Lilith Vala Xara for the original implementation
and JSKitty for the Rust port."""


def default_location(option: str | None) -> str:
    """``--location`` wins, then $TDATE_LOCATION, then Las Vegas."""

    return option or os.environ.get("TDATE_LOCATION") or DEFAULT_LOCATION


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tdate",
        description="Displays the current Thelemic date",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-l",
        "--location",
        default=None,
        help=f'Location for date calculation (e.g., "Las Vegas, NV"). Default: $TDATE_LOCATION or "{DEFAULT_LOCATION}".',
    )
    parser.add_argument(
        "datetime",
        nargs="*",
        metavar="YEAR MONTH DAY HOUR MINUTE LOCATION",
        help="Date and time in format: year month day hour minute location",
    )
    parser.add_argument(
        "--ephe",
        help="Optional Swiss Ephemeris directory. Defaults to SWISSEPH_EPHE env or the built-in Moshier ephemeris.",
    )
    parser.add_argument(
        "--details",
        action="store_true",
        help="Also show coordinates, timezone and exact longitudes in a table.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log lookups and positions to stderr.")
    parser.add_argument("-V", "--version", action="version", version=VERSION_TEXT)
    parser.add_argument("--oz", action="store_true", help=argparse.SUPPRESS)
    return parser


def parse_datetime_args(parser: argparse.ArgumentParser, values: list[str]) -> tuple[int, int, int, int, int, str]:
    """Validate the six positional values; exits through ``parser.error`` on bad input."""

    if len(values) != len(DATETIME_FIELDS):
        parser.error(
            f"expected {len(DATETIME_FIELDS)} arguments for datetime "
            f"(year month day hour minute location), got {len(values)}"
        )
    numbers: list[int] = []
    for field, raw in zip(DATETIME_FIELDS[:5], values[:5]):
        try:
            numbers.append(int(raw))
        except ValueError:
            parser.error(f"invalid {field.lower()}: {raw!r}")
    year, month, day, hour, minute = numbers
    return year, month, day, hour, minute, values[5]


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point.

    Usage:
        tdate [-l LOCATION]
        tdate YEAR MONTH DAY HOUR MINUTE LOCATION
    """

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.getLogger("thelemic_date").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    if args.oz:
        print(LIBER_OZ)
        return

    if args.ephe:
        astro_engine.set_ephe_path(str(Path(args.ephe).expanduser()))

    try:
        if args.datetime:
            year, month, day, hour, minute, location = parse_datetime_args(parser, args.datetime)
            result = thelemic_date_at(year, month, day, hour, minute, location)
        else:
            result = thelemic_date_now(default_location(args.location))
    except ThelemicDateError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.details:
        output.print_details(result)
    else:
        print(output.format_thelemic_date(result))


if __name__ == "__main__":
    main()
