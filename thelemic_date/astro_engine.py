"""Swiss Ephemeris wrapper for the Sun and Moon positions used by the calendar."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone

import swisseph as swe

from .errors import EphemerisError
from .zodiac import normalize_longitude

logger = logging.getLogger(__name__)

EPHE_PATH = os.environ.get("SWISSEPH_EPHE")
BODIES: dict[str, int] = {
    "Sun": swe.SUN,
    "Moon": swe.MOON,
}


def set_ephe_path(path: str | None) -> None:
    """Override the ephemeris directory used for all Swiss Ephemeris calls."""

    global EPHE_PATH
    EPHE_PATH = path


def ephemeris_flags() -> int:
    """
    Pick the ephemeris backend.

    With a data directory configured we use the Swiss Ephemeris files; without
    one we ask for the built-in Moshier ephemeris explicitly, which is good to
    well under a degree for the Sun and Moon and needs no files.
    """

    path = EPHE_PATH or os.environ.get("SWISSEPH_EPHE")
    if path:
        swe.set_ephe_path(path)
        return swe.FLG_SWIEPH
    return swe.FLG_MOSEPH


def julian_day_from_datetime(dt: datetime) -> float:
    """Convert a datetime into a Julian day (UT). Naive values are taken as UTC."""

    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)

    ut_hour = (
        dt.hour
        + dt.minute / 60.0
        + dt.second / 3600.0
        + dt.microsecond / 3_600_000_000.0
    )
    return swe.julday(dt.year, dt.month, dt.day, ut_hour, swe.GREG_CAL)


def body_longitude(jd_ut: float, body: str) -> float:
    """Geocentric apparent tropical ecliptic longitude of ``body`` in [0, 360)."""

    try:
        swe_id = BODIES[body]
    except KeyError:
        raise ValueError(f"Unsupported body: {body!r}") from None

    flags = ephemeris_flags()
    try:
        result = swe.calc_ut(jd_ut, swe_id, flags)
    except swe.Error as exc:
        raise EphemerisError(f"Swiss Ephemeris failed for {body} at JD {jd_ut}: {exc}") from exc

    # pyswisseph returns either a flat tuple of floats or (position_tuple, retflag).
    if len(result) == 2 and isinstance(result[0], (tuple, list)):
        position = result[0]
    else:
        position = result
    lon = normalize_longitude(float(position[0]))
    logger.debug("%s longitude at JD %.6f: %.6f°", body, jd_ut, lon)
    return lon


def sun_longitude(jd_ut: float) -> float:
    return body_longitude(jd_ut, "Sun")


def moon_longitude(jd_ut: float) -> float:
    return body_longitude(jd_ut, "Moon")
