from __future__ import annotations

from dataclasses import dataclass

import pytest

from thelemic_date import geocoding

LAS_VEGAS = (36.1672559, -115.148516)


@dataclass
class FakePoint:
    latitude: float
    longitude: float
    address: str


class FakeGeocoder:
    """Stands in for geopy's Nominatim; answers from a fixed table."""

    def __init__(self, places: dict[str, FakePoint] | None = None, error: Exception | None = None):
        self.places = places or {}
        self.error = error
        self.calls: list[str] = []

    def geocode(self, query: str, exactly_one: bool = True):
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return self.places.get(query)


class FakeTimezoneFinder:
    def __init__(self, tz_name: str | None = "America/Los_Angeles"):
        self.tz_name = tz_name

    def timezone_at(self, lat: float, lng: float) -> str | None:
        return self.tz_name


@pytest.fixture(autouse=True)
def _clear_location_cache():
    geocoding.clear_cache()
    yield
    geocoding.clear_cache()


@pytest.fixture
def fake_geocoder(monkeypatch) -> FakeGeocoder:
    geocoder = FakeGeocoder(
        {"Las Vegas, NV": FakePoint(*LAS_VEGAS, "Las Vegas, Clark County, Nevada, United States")}
    )
    monkeypatch.setattr(geocoding, "default_geocoder", lambda: geocoder)
    monkeypatch.setattr(geocoding, "default_tz_finder", lambda: FakeTimezoneFinder())
    return geocoder
