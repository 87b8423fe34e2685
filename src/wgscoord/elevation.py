from __future__ import annotations

from typing import Optional

from wgscoord.errors import UnrecognizedUnitError


FEET_PER_METRE = 3.28084


def resolve_elevation(value: Optional[str], unit: Optional[str] = "", text: str = "") -> Optional[float]:
    """
    Elevation in metres from a number and a unit token.

      ("1160", "ft") -> 353.57...
      ("1160", "m")  -> 1160.0
      ("", "")       -> None (absent, not zero)

    Raises UnrecognizedUnitError for any unit other than empty, "m" or "ft".
    """
    if value is None or not value.strip():
        return None

    unit = (unit or "").strip().lower()
    elevation = float(value)
    if unit == "ft":
        return elevation / FEET_PER_METRE
    if unit in ("", "m"):
        return elevation
    raise UnrecognizedUnitError(unit, text)
