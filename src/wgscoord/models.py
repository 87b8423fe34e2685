from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatConfig:
    """
    Text rendering options.

    decimal_places:
      digits after the point in the decimal rendering ("175.83667, -39.78000")
    field_separator:
      between degrees, minutes and seconds in the DMS rendering
    hemisphere_separator:
      between the seconds and the hemisphere letter
    """
    decimal_places: int = 5
    field_separator: str = " "
    hemisphere_separator: str = " "
