from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from wgscoord.core.formatter import DEFAULT_FORMAT, format_decimal, format_dms, western_signed
from wgscoord.models import FormatConfig

logger = logging.getLogger(__name__)


def normalize_longitude(longitude: float) -> float:
    """Negative (western) longitudes are stored as 360 + longitude."""
    if longitude < 0:
        return longitude + 360.0
    return longitude


def _absent_if_nan(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    value = float(value)
    return None if math.isnan(value) else value


@dataclass(eq=False)
class CanonicalCoordinate:
    """
    Earth coordinate in longitude, latitude, metres AMSL.

    longitude:
      stored in [0, 360); values of 180 and over are the western hemisphere.
      This keeps polygons straddling the 180 meridian contiguous.
    latitude:
      degrees, negative is south. Not range-checked.
    elevation:
      metres above mean sea level, or None when not given.

    ``x``/``y``/``z`` alias the three fields so the value can be used where a
    generic 3D point is expected.
    """
    longitude: float
    latitude: float
    elevation: Optional[float] = None

    def __post_init__(self) -> None:
        self.longitude = normalize_longitude(float(self.longitude))
        self.latitude = float(self.latitude)
        self.elevation = _absent_if_nan(self.elevation)
        if abs(self.latitude) > 90.0:
            logger.warning("Latitude %s is outside [-90, 90]; keeping it as given", self.latitude)

    @property
    def x(self) -> float:
        return self.longitude

    @x.setter
    def x(self, value: float) -> None:
        self.longitude = normalize_longitude(float(value))

    @property
    def y(self) -> float:
        return self.latitude

    @y.setter
    def y(self, value: float) -> None:
        self.latitude = value

    @property
    def z(self) -> Optional[float]:
        return self.elevation

    @z.setter
    def z(self, value: Optional[float]) -> None:
        self.elevation = _absent_if_nan(value)

    @property
    def signed_longitude(self) -> float:
        return western_signed(self.longitude)

    @classmethod
    def from_coordinate(cls, point: Any) -> "CanonicalCoordinate":
        """Copy x, y, z from any point-like object (z may be missing or NaN)."""
        return cls(point.x, point.y, getattr(point, "z", None))

    @classmethod
    def from_text(cls, text: str) -> "CanonicalCoordinate":
        from wgscoord.core.parser import parse_coordinate
        return parse_coordinate(text)

    @classmethod
    def from_lat_lon(cls, lat: str, lon: str) -> "CanonicalCoordinate":
        from wgscoord.core.parser import parse_lat_lon
        return parse_lat_lon(lat, lon)

    def copy(self) -> "CanonicalCoordinate":
        return CanonicalCoordinate(self.longitude, self.latitude, self.elevation)

    def to_decimal(self, config: Optional[FormatConfig] = None) -> str:
        return format_decimal(self.longitude, self.latitude, config or DEFAULT_FORMAT)

    def to_dms(self, config: Optional[FormatConfig] = None) -> str:
        return format_dms(self.longitude, self.latitude, config or DEFAULT_FORMAT)

    def __str__(self) -> str:
        return self.to_decimal()
