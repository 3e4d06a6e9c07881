"""Dataclasses shared by the geocoding, ephemeris and formatting layers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Location:
    """A geocoded place with the IANA timezone in force there."""

    query: str
    address: str
    latitude: float
    longitude: float
    timezone: str


@dataclass(frozen=True)
class ZodiacPosition:
    """Tropical placement of a single body."""

    body: str
    longitude: float
    sign: str
    degree: int  # whole degrees within the sign, 0..29


@dataclass
class ThelemicDate:
    """Everything needed to print (or inspect) one Thelemic date."""

    location: Location
    datetime_local: datetime
    datetime_utc: datetime
    julian_day: float
    sun: ZodiacPosition
    moon: ZodiacPosition
    dies: str
    anno_years: int
    anno: str
