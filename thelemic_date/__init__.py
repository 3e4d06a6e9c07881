"""Compute the Thelemic date from the Sun, the Moon, the weekday and the years since 1904."""

__version__ = "0.1.1"

from .errors import (  # noqa: E402
    EphemerisError,
    GeocodingError,
    InvalidDateError,
    LocationNotFoundError,
    ThelemicDateError,
)
from .models import Location, ThelemicDate, ZodiacPosition  # noqa: E402
from .output import format_thelemic_date  # noqa: E402
from .reckoning import compute_thelemic_date, thelemic_date_at, thelemic_date_now  # noqa: E402

__all__ = [
    "Location",
    "ThelemicDate",
    "ZodiacPosition",
    "ThelemicDateError",
    "LocationNotFoundError",
    "GeocodingError",
    "EphemerisError",
    "InvalidDateError",
    "compute_thelemic_date",
    "thelemic_date_at",
    "thelemic_date_now",
    "format_thelemic_date",
]
