"""Resolve a free-form place name into coordinates and an IANA timezone."""

from __future__ import annotations

import logging
import os

from geopy.exc import GeocoderServiceError
from geopy.geocoders import Nominatim
from timezonefinder import TimezoneFinder

from .errors import GeocodingError, LocationNotFoundError
from .models import Location

logger = logging.getLogger(__name__)

USER_AGENT = os.environ.get("TDATE_USER_AGENT", "thelemic-date/0.1.1 (pyswisseph)")
GEOCODE_TIMEOUT = float(os.environ.get("TDATE_GEOCODE_TIMEOUT", "10"))

_geolocator: Nominatim | None = None
_tzf: TimezoneFinder | None = None
_location_cache: dict[str, Location] = {}


def default_geocoder() -> Nominatim:
    global _geolocator
    if _geolocator is None:
        _geolocator = Nominatim(user_agent=USER_AGENT, timeout=GEOCODE_TIMEOUT)
    return _geolocator


def default_tz_finder() -> TimezoneFinder:
    # TimezoneFinder loads its polygon data on construction; build it once.
    global _tzf
    if _tzf is None:
        _tzf = TimezoneFinder()
    return _tzf


def clear_cache() -> None:
    _location_cache.clear()


def timezone_for(latitude: float, longitude: float, tz_finder=None) -> str:
    """IANA timezone name at the given coordinates."""

    finder = tz_finder or default_tz_finder()
    tz_name = finder.timezone_at(lat=latitude, lng=longitude)
    if not tz_name:
        raise GeocodingError(f"No timezone found for {latitude:.4f}, {longitude:.4f}")
    return tz_name


def resolve_location(place: str, geocoder=None, tz_finder=None) -> Location:
    """
    Geocode ``place`` with Nominatim and attach the timezone at that point.

    ``geocoder`` and ``tz_finder`` default to shared Nominatim/TimezoneFinder
    instances; anything with the same ``geocode`` / ``timezone_at`` methods
    works. Successful lookups are cached for the life of the process.
    """

    key = " ".join(place.split()).casefold()
    if not key:
        raise LocationNotFoundError("Location is empty")
    if key in _location_cache:
        return _location_cache[key]

    geolocator = geocoder or default_geocoder()
    logger.debug("Geocoding %r", place)
    try:
        found = geolocator.geocode(place.strip(), exactly_one=True)
    except GeocoderServiceError as exc:
        raise GeocodingError(f"Geocoding lookup failed for {place!r}: {exc}") from exc
    if found is None:
        raise LocationNotFoundError(f"Location not found: {place!r}")

    lat = float(found.latitude)
    lon = float(found.longitude)
    tz_name = timezone_for(lat, lon, tz_finder)
    logger.debug("Resolved %r to %.4f, %.4f (%s)", place, lat, lon, tz_name)

    location = Location(
        query=place.strip(),
        address=str(found.address),
        latitude=lat,
        longitude=lon,
        timezone=tz_name,
    )
    _location_cache[key] = location
    return location
