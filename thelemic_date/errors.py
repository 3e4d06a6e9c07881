"""Exceptions raised while computing a Thelemic date."""

from __future__ import annotations


class ThelemicDateError(Exception):
    """Base class for every error the library raises on purpose."""


class LocationNotFoundError(ThelemicDateError):
    """The geocoder returned no match for the location string."""


class GeocodingError(ThelemicDateError):
    """The geocoding service or the timezone lookup failed."""


class EphemerisError(ThelemicDateError):
    """Swiss Ephemeris could not compute a position."""


class InvalidDateError(ThelemicDateError, ValueError):
    """Calendar values that cannot be turned into a usable local instant."""
