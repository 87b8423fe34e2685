from __future__ import annotations

from enum import Enum
from typing import Tuple

from wgscoord.angles import ParsedAxisValue


LATITUDE_LIMIT = 90.0


class AxisOrder(str, Enum):
    LON_LAT = "lon_lat"
    LAT_LON = "lat_lon"


def decide_axis_order(first: ParsedAxisValue, second: ParsedAxisValue) -> AxisOrder:
    """
    Decide whether the first value read from the text is latitude.

    Priority:
      1. an N/S letter marks its own value as latitude
      2. first |v| < 90 and second |v| > 90 -> latitude first
      3. otherwise longitude first (x, y order)
    """
    if first.is_latitude_marked:
        return AxisOrder.LAT_LON
    if second.is_latitude_marked:
        return AxisOrder.LON_LAT
    if abs(first.degrees) < LATITUDE_LIMIT and abs(second.degrees) > LATITUDE_LIMIT:
        return AxisOrder.LAT_LON
    return AxisOrder.LON_LAT


def assign_axes(
    first: ParsedAxisValue, second: ParsedAxisValue, order: AxisOrder
) -> Tuple[float, float]:
    """Return (longitude, latitude) in signed degrees."""
    if order is AxisOrder.LAT_LON:
        return second.degrees, first.degrees
    return first.degrees, second.degrees
