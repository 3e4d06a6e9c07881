"""Weekday names and the Anno year count of the Thelemic calendar."""

from __future__ import annotations

from datetime import date, datetime

from .errors import InvalidDateError

EPOCH_YEAR = 1904

# The new year turns at the vernal equinox; used when no Sun position is known.
EQUINOX_MONTH = 3
EQUINOX_DAY = 20

CYCLE_LENGTH = 22

NUMERALS = [
    "0", "i", "ii", "iii", "iv",
    "v", "vi", "vii", "viii", "ix",
    "x", "xi", "xii", "xiii", "xiv",
    "xv", "xvi", "xvii", "xviii", "xix",
    "xx", "xxi", "xxii",
]

DAYS_OF_WEEK = [
    "Lunae",
    "Martis",
    "Mercurii",
    "Jovis",
    "Veneris",
    "Saturnii",
    "Solis",
]


def dies_for_date(day: date) -> str:
    """Latin day name; ``date.weekday()`` counts Monday as 0, as does the table."""

    return DAYS_OF_WEEK[day.weekday()]


def _before_equinox(local_dt: datetime, sun_longitude: float | None) -> bool:
    if sun_longitude is not None:
        # Jan..Jun with the Sun still in the second half of the zodiac means
        # it has not crossed 0° Aries yet this calendar year.
        return local_dt.month <= 6 and sun_longitude % 360.0 >= 180.0
    return (local_dt.month, local_dt.day) < (EQUINOX_MONTH, EQUINOX_DAY)


def anno_years(local_dt: datetime, sun_longitude: float | None = None) -> int:
    """
    Whole Thelemic years elapsed since the vernal equinox of 1904.

    With ``sun_longitude`` the equinox is located astronomically; without it
    the year is assumed to turn on 20 March.
    """

    years = local_dt.year - EPOCH_YEAR
    if _before_equinox(local_dt, sun_longitude):
        years -= 1
    if years < 0:
        raise InvalidDateError(
            f"{local_dt.date().isoformat()} falls before the vernal equinox of {EPOCH_YEAR}"
        )
    return years


def anno_token(years: int) -> str:
    """
    Render a year count as cycle + year numerals, e.g. 122 -> "Vxii".

    The first part counts completed 22-year cycles (upper case), the second the
    year inside the current cycle.
    """

    if years < 0:
        raise InvalidDateError(f"Anno year cannot be negative: {years}")
    cycle, year_in_cycle = divmod(years, CYCLE_LENGTH)
    if cycle >= len(NUMERALS):
        raise InvalidDateError(f"Anno year {years} is beyond the numeral table")
    return f"{NUMERALS[cycle].upper()}{NUMERALS[year_in_cycle]}"
