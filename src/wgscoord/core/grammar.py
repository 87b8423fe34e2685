"""Textual grammars for coordinate strings.

Two-axis grammars split "<axis> <sep> <axis> [<sep> <elevation>[unit]]" into
named groups; every axis carries ``prefix``, ``degrees``, ``minutes``,
``seconds`` and ``suffix`` groups, namespaced ``first_`` and ``second_`` in the
order the axes appear. Single-axis grammars carry ``degrees``, ``minutes``,
``seconds``, ``prefix`` and ``hemisphere`` (any of them but ``degrees`` may be
absent from the pattern).

Matching never raises: a structural mismatch is reported as ``None``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from wgscoord.angles import ParsedAxisValue, resolve_degrees


_PREFIX = r"(?P<{a}prefix>[NSEW+\-]?)\s*"
_SUFFIX = r"(?P<{a}suffix>[NSEW]?)"

_DECIMAL_BODY = r"(?P<{a}degrees>\d{{1,3}}(?:\.\d+)?)"
_MINUTES_BODY = r"(?P<{a}degrees>\d{{1,3}})[,\s]*(?P<{a}minutes>\d\d(?:\.\d+)?)"
_SECONDS_BODY = (
    r"(?P<{a}degrees>\d{{1,3}})[,\s]*(?P<{a}minutes>\d\d)[,\s]*"
    r"(?P<{a}seconds>\d\d(?:\.\d+)?)"
)

_ELEVATION = r"(?:[,\s]+(?P<elevation>-?\d+(?:\.\d+)?)\s*(?P<unit>[a-z]*))?"


def _axis(body: str, name: str) -> str:
    a = f"{name}_"
    return (_PREFIX + body + _SUFFIX).format(a=a)


def _two_axis_pattern(body: str) -> re.Pattern:
    return re.compile(
        r"^\s*" + _axis(body, "first") + r"[,\s]+" + _axis(body, "second") + _ELEVATION + r"\s*$",
        re.IGNORECASE,
    )


@dataclass(frozen=True)
class AxisFields:
    """Raw sub-fields of one axis as they appeared in the text."""
    prefix: str = ""
    degrees: str = ""
    minutes: str = ""
    seconds: str = ""
    suffix: str = ""

    def resolve(self) -> Optional[ParsedAxisValue]:
        return resolve_degrees(self.prefix, self.degrees, self.minutes, self.seconds, self.suffix)


@dataclass(frozen=True)
class GrammarMatch:
    first: AxisFields
    second: AxisFields
    elevation: str = ""
    unit: str = ""


def _group(groups: dict, key: str) -> str:
    return groups.get(key) or ""


def _axis_fields(groups: dict, name: str) -> AxisFields:
    return AxisFields(
        prefix=_group(groups, f"{name}_prefix"),
        degrees=_group(groups, f"{name}_degrees"),
        minutes=_group(groups, f"{name}_minutes"),
        seconds=_group(groups, f"{name}_seconds"),
        suffix=_group(groups, f"{name}_suffix"),
    )


@dataclass(frozen=True)
class Grammar:
    """A two-axis template with an optional trailing elevation."""
    name: str
    pattern: re.Pattern

    def match(self, text: str) -> Optional[GrammarMatch]:
        m = self.pattern.search(text)
        if not m:
            return None
        groups = m.groupdict()
        return GrammarMatch(
            first=_axis_fields(groups, "first"),
            second=_axis_fields(groups, "second"),
            elevation=_group(groups, "elevation"),
            unit=_group(groups, "unit"),
        )


@dataclass(frozen=True)
class SingleAxisGrammar:
    """A template for one axis given on its own."""
    name: str
    pattern: re.Pattern

    @classmethod
    def from_pattern(cls, pattern: Union[str, re.Pattern], name: str = "custom") -> "SingleAxisGrammar":
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.IGNORECASE)
        if "degrees" not in pattern.groupindex:
            raise ValueError(f"Pattern {pattern.pattern!r} has no 'degrees' group")
        return cls(name=name, pattern=pattern)

    def match(self, text: str) -> Optional[AxisFields]:
        m = self.pattern.search(text)
        if not m:
            return None
        groups = m.groupdict()
        return AxisFields(
            prefix=_group(groups, "prefix"),
            degrees=_group(groups, "degrees"),
            minutes=_group(groups, "minutes"),
            seconds=_group(groups, "seconds"),
            suffix=_group(groups, "hemisphere"),
        )


DECIMAL_DEGREES = Grammar("decimal degrees", _two_axis_pattern(_DECIMAL_BODY))
DEGREES_DECIMAL_MINUTES = Grammar("degrees, decimal minutes", _two_axis_pattern(_MINUTES_BODY))
DEGREES_MINUTES_SECONDS = Grammar("degrees, minutes, decimal seconds", _two_axis_pattern(_SECONDS_BODY))

# Tried in this order; the first grammar that matches and resolves wins.
GRAMMARS: Tuple[Grammar, ...] = (
    DECIMAL_DEGREES,
    DEGREES_DECIMAL_MINUTES,
    DEGREES_MINUTES_SECONDS,
)

# A lone group after the degrees is decimal minutes: "3930.78S", "393030.78S".
LAT_DMS = SingleAxisGrammar(
    "latitude DMS",
    re.compile(
        r"^\s*(?P<degrees>\d\d?)(?P<minutes>\d\d(?:\.\d+)?)(?P<seconds>\d\d(?:\.\d+)?)?"
        r"(?:\D\s)?(?P<hemisphere>[NS])",
        re.IGNORECASE,
    ),
)
LON_DMS = SingleAxisGrammar(
    "longitude DMS",
    re.compile(
        r"^\s*(?P<degrees>\d\d\d)(?P<minutes>\d\d(?:\.\d+)?)(?P<seconds>\d\d(?:\.\d+)?)?"
        r"(?:\D\s)?(?P<hemisphere>[EW])",
        re.IGNORECASE,
    ),
)
