from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


NEGATIVE_PREFIXES = frozenset("WS-")
NEGATIVE_SUFFIXES = frozenset("WS")


class SignSource(str, Enum):
    """Where the sign of an axis value came from."""
    PREFIX_LETTER = "prefix_letter"
    SUFFIX_LETTER = "suffix_letter"
    SIGN = "sign"
    UNMARKED = "unmarked"


@dataclass(frozen=True)
class ParsedAxisValue:
    """Signed decimal degrees plus the notation that carried the sign."""
    degrees: float
    source: SignSource = SignSource.UNMARKED
    hemisphere: str = ""  # upper-case N/S/E/W, empty unless a letter was used

    @property
    def is_latitude_marked(self) -> bool:
        return self.hemisphere in ("N", "S")


def _sign_source(prefix: str, suffix: str) -> SignSource:
    if prefix in ("+", "-") or suffix in ("+", "-"):
        return SignSource.SIGN
    if prefix:
        return SignSource.PREFIX_LETTER
    if suffix:
        return SignSource.SUFFIX_LETTER
    return SignSource.UNMARKED


def resolve_degrees(
    prefix: Optional[str],
    degrees: str,
    minutes: Optional[str] = None,
    seconds: Optional[str] = None,
    suffix: Optional[str] = None,
) -> Optional[ParsedAxisValue]:
    """
    Combine sign markers and degree/minute/second fields into one value.

      ("S", "39", "30", "30.78", "")  -> -39.50855 (PREFIX_LETTER, "S")
      ("", "175", "33.8", None, "W")  -> -175.5633 (SUFFIX_LETTER, "W")
      ("-", "39.78", None, None, "")  -> -39.78    (SIGN)

    Returns None when both a prefix and a suffix are given.
    """
    prefix = (prefix or "").strip().upper()
    suffix = (suffix or "").strip().upper()
    if prefix and suffix:
        return None

    source = _sign_source(prefix, suffix)
    negate = prefix in NEGATIVE_PREFIXES if prefix else suffix in NEGATIVE_SUFFIXES

    value = float(degrees)
    if minutes and minutes.strip():
        value += float(minutes) / 60.0
    if seconds and seconds.strip():
        value += float(seconds) / 3600.0

    letter = prefix or suffix
    hemisphere = letter if letter in ("N", "S", "E", "W") else ""
    return ParsedAxisValue(
        degrees=-value if negate else value,
        source=source,
        hemisphere=hemisphere,
    )
