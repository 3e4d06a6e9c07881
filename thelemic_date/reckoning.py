"""Compose a Thelemic date from a place and a moment."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from . import astro_engine
from .era import anno_token, anno_years, dies_for_date
from .errors import GeocodingError, InvalidDateError
from .geocoding import resolve_location
from .models import Location, ThelemicDate
from .zodiac import zodiac_position

logger = logging.getLogger(__name__)


def zone_for(tz_name: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise GeocodingError(f"Invalid timezone: {tz_name!r}") from exc


def localize(year: int, month: int, day: int, hour: int, minute: int, tz_name: str) -> datetime:
    """
    Attach the IANA zone ``tz_name`` to a wall-clock time.

    Times that occur twice (clocks going back) or never (clocks going forward)
    are rejected rather than guessed.
    """

    try:
        naive = datetime(year, month, day)
    except ValueError:
        raise InvalidDateError("Invalid date") from None
    try:
        naive = naive.replace(hour=hour, minute=minute)
    except ValueError:
        raise InvalidDateError("Invalid time") from None

    tz = zone_for(tz_name)
    first = naive.replace(tzinfo=tz, fold=0)
    second = naive.replace(tzinfo=tz, fold=1)
    if first.utcoffset() != second.utcoffset():
        raise InvalidDateError("Ambiguous local time")
    return first


def compute_thelemic_date(location: Location, local_dt: datetime) -> ThelemicDate:
    """Compute all components of the date for an aware local datetime."""

    if local_dt.tzinfo is None:
        raise InvalidDateError("Local datetime must carry a timezone")

    try:
        dt_utc = local_dt.astimezone(timezone.utc)
    except OverflowError:
        # wall-clock times within a day of datetime.min/max have no UTC value
        raise InvalidDateError("Invalid date") from None
    jd_ut = astro_engine.julian_day_from_datetime(dt_utc)
    sun = zodiac_position("Sun", astro_engine.sun_longitude(jd_ut))
    moon = zodiac_position("Moon", astro_engine.moon_longitude(jd_ut))

    years = anno_years(local_dt, sun.longitude)
    logger.debug("JD %.6f: Sun %.4f°, Moon %.4f°, %d years", jd_ut, sun.longitude, moon.longitude, years)
    return ThelemicDate(
        location=location,
        datetime_local=local_dt,
        datetime_utc=dt_utc,
        julian_day=jd_ut,
        sun=sun,
        moon=moon,
        dies=dies_for_date(local_dt.date()),
        anno_years=years,
        anno=anno_token(years),
    )


def thelemic_date_now(place: str, now: datetime | None = None) -> ThelemicDate:
    """Thelemic date at the current instant (or ``now``) in ``place``'s timezone."""

    location = resolve_location(place)
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return compute_thelemic_date(location, moment.astimezone(zone_for(location.timezone)))


def thelemic_date_at(year: int, month: int, day: int, hour: int, minute: int, place: str) -> ThelemicDate:
    """Thelemic date for a wall-clock time in ``place``."""

    location = resolve_location(place)
    local_dt = localize(year, month, day, hour, minute, location.timezone)
    return compute_thelemic_date(location, local_dt)
