from __future__ import annotations

from typing import Tuple

from wgscoord.models import FormatConfig


DEFAULT_FORMAT = FormatConfig()


def format_decimal(longitude: float, latitude: float, config: FormatConfig = DEFAULT_FORMAT) -> str:
    """'lon, lat' in fixed-point degrees, e.g. '175.83667, -39.78000'. No elevation."""
    places = config.decimal_places
    return f"{longitude:.{places}f}, {latitude:.{places}f}"


def split_dms(value: float) -> Tuple[int, int, float]:
    """
    Magnitude of an angle as (degrees, minutes, seconds), seconds rounded to
    0.1 with the carry pushed into minutes and degrees.
    """
    magnitude = abs(value)
    degrees = int(magnitude)
    minutes_float = (magnitude - degrees) * 60.0
    minutes = int(minutes_float)
    seconds = round((minutes_float - minutes) * 60.0, 1)
    if seconds >= 60.0:
        seconds -= 60.0
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1
    return degrees, minutes, abs(seconds)


def format_dms_axis(value: float, hemispheres: str, config: FormatConfig = DEFAULT_FORMAT) -> str:
    """
    One axis as 'DD MM SS.S H'. ``hemispheres`` is the positive then the
    negative letter, "NS" or "EW".
    """
    degrees, minutes, seconds = split_dms(value)
    letter = hemispheres[1] if value < 0 else hemispheres[0]
    sep = config.field_separator
    return f"{degrees:02d}{sep}{minutes:02d}{sep}{seconds:04.1f}{config.hemisphere_separator}{letter}"


def western_signed(longitude: float) -> float:
    """Stored longitude in [0, 360) back to [-180, 180)."""
    return longitude - 360.0 if longitude >= 180.0 else longitude


def format_dms(longitude: float, latitude: float, config: FormatConfig = DEFAULT_FORMAT) -> str:
    """'DD MM SS.S N, DDD MM SS.S E', latitude first."""
    return (
        format_dms_axis(latitude, "NS", config)
        + ", "
        + format_dms_axis(western_signed(longitude), "EW", config)
    )
