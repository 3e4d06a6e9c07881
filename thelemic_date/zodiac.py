"""Tropical zodiac helpers: ecliptic longitude to sign and degree."""

from __future__ import annotations

from .models import ZodiacPosition

SIGNS = [
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
]

SIGN_SYMBOLS = {
    "Aries": "♈",
    "Taurus": "♉",
    "Gemini": "♊",
    "Cancer": "♋",
    "Leo": "♌",
    "Virgo": "♍",
    "Libra": "♎",
    "Scorpio": "♏",
    "Sagittarius": "♐",
    "Capricorn": "♑",
    "Aquarius": "♒",
    "Pisces": "♓",
}

BODY_SYMBOLS = {
    "Sun": "☉",
    "Moon": "☽",
}


def normalize_longitude(longitude: float) -> float:
    """Normalize to [0, 360)."""

    value = longitude % 360.0
    # -1e-15 % 360.0 rounds to 360.0 in floating point
    return 0.0 if value >= 360.0 else value


def sign_index_from_longitude(longitude: float) -> int:
    return int(normalize_longitude(longitude) // 30) % 12


def sign_from_longitude(longitude: float) -> str:
    return SIGNS[sign_index_from_longitude(longitude)]


def degree_in_sign(longitude: float) -> int:
    """Whole degrees already travelled through the current sign (truncated)."""

    return int(normalize_longitude(longitude) % 30.0)


def zodiac_position(body: str, longitude: float) -> ZodiacPosition:
    lon = normalize_longitude(longitude)
    return ZodiacPosition(
        body=body,
        longitude=lon,
        sign=sign_from_longitude(lon),
        degree=degree_in_sign(lon),
    )
