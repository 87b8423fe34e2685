"""Text to CanonicalCoordinate.

Free text is tried against each grammar of ``GRAMMARS`` in order. A grammar
that does not match, or whose axes carry both a prefix and a suffix sign, is
skipped. An unknown elevation unit aborts the parse.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Union

from wgscoord.angles import ParsedAxisValue
from wgscoord.core.axis_order import AxisOrder, assign_axes, decide_axis_order
from wgscoord.core.grammar import (
    GRAMMARS,
    LAT_DMS,
    LON_DMS,
    AxisFields,
    Grammar,
    GrammarMatch,
    SingleAxisGrammar,
)
from wgscoord.domain.coordinate import CanonicalCoordinate
from wgscoord.elevation import resolve_elevation
from wgscoord.errors import CoordinateFormatError

logger = logging.getLogger(__name__)


def _build(
    text: str, match: GrammarMatch, first: ParsedAxisValue, second: ParsedAxisValue, order: AxisOrder
) -> CanonicalCoordinate:
    elevation = resolve_elevation(match.elevation, match.unit, text)
    longitude, latitude = assign_axes(first, second, order)
    return CanonicalCoordinate(longitude, latitude, elevation)


def parse_coordinate(text: str, grammars: Iterable[Grammar] = GRAMMARS) -> CanonicalCoordinate:
    """
    Parse "lon, lat[, elev[unit]]" or "lat, lon[, ...]" in decimal degrees,
    degrees + decimal minutes, or degrees/minutes/decimal seconds.

    Examples:
      "175.836666,-39.78,1160ft"
      "E175.836666,N39.78"
      "175.836666W,39.78N,1160ft"
      "17533.836666,-3930.78"
      "1753300.836666,-393030.78"

    Raises:
      UnrecognizedUnitError: the elevation unit is not m or ft
      CoordinateFormatError: no grammar accepts the text
    """
    if text is None:
        raise CoordinateFormatError("", "Coordinate text is required")

    for grammar in grammars:
        match = grammar.match(text)
        if match is None:
            logger.debug("%s: no match for %r", grammar.name, text)
            continue

        first = match.first.resolve()
        second = match.second.resolve() if first is not None else None
        if first is None or second is None:
            logger.debug("%s: prefix and suffix both given in %r", grammar.name, text)
            continue

        order = decide_axis_order(first, second)
        logger.debug("%s: matched %r as %s", grammar.name, text, order.value)
        return _build(text, match, first, second, order)

    logger.debug("No grammar accepted %r", text)
    raise CoordinateFormatError(text)


def parse_with_grammar(text: str, grammar: Grammar, lat_follows_lon: bool = True) -> CanonicalCoordinate:
    """Parse with one grammar whose axis order is known in advance."""
    match = grammar.match(text)
    if match is None:
        raise CoordinateFormatError(text, f"Text does not match {grammar.name}")

    first = match.first.resolve()
    second = match.second.resolve()
    if first is None or second is None:
        raise CoordinateFormatError(text, "Ambiguous hemisphere (prefix and suffix both given)")

    order = AxisOrder.LON_LAT if lat_follows_lon else AxisOrder.LAT_LON
    return _build(text, match, first, second, order)


def _from_axes(lon: AxisFields, lat: AxisFields, text: str) -> CanonicalCoordinate:
    longitude = lon.resolve()
    latitude = lat.resolve()
    if longitude is None or latitude is None:
        raise CoordinateFormatError(text, "Ambiguous hemisphere (prefix and suffix both given)")
    return CanonicalCoordinate(longitude.degrees, latitude.degrees)


def parse_lat_lon(lat: str, lon: str) -> CanonicalCoordinate:
    """
    Build a coordinate from separate latitude and longitude strings.

      ("393030.78S", "1753300.8E")  -> DMS with hemisphere suffix
      ("-39.5", "175.5")            -> plain signed decimal degrees
    """
    lat_fields = LAT_DMS.match(lat)
    lon_fields = LON_DMS.match(lon)
    if lat_fields is not None and lon_fields is not None:
        return _from_axes(lon_fields, lat_fields, f"{lat}, {lon}")

    try:
        return CanonicalCoordinate(float(lon), float(lat))
    except ValueError as e:
        raise CoordinateFormatError(f"{lat}, {lon}") from e


def parse_with_patterns(
    lon: str,
    lat: str,
    lon_pattern: Union[str, re.Pattern, SingleAxisGrammar],
    lat_pattern: Union[str, re.Pattern, SingleAxisGrammar],
) -> CanonicalCoordinate:
    """
    Build a coordinate from separate strings using caller-supplied patterns.

    Each pattern needs a ``degrees`` group and may have ``minutes``,
    ``seconds``, ``prefix`` and ``hemisphere`` groups, e.g.
    r"(?P<degrees>\\d\\d\\d)(?P<minutes>\\d\\d)(?P<seconds>\\d\\d(?:\\.\\d+)?)(?P<hemisphere>[EW])"
    """
    lon_grammar = _single_axis(lon_pattern, "longitude")
    lat_grammar = _single_axis(lat_pattern, "latitude")
    lon_fields = lon_grammar.match(lon)
    lat_fields = lat_grammar.match(lat)
    if lon_fields is None or lat_fields is None:
        raise CoordinateFormatError(f"{lat}, {lon}", "Unrecognised latitude/longitude format")
    return _from_axes(lon_fields, lat_fields, f"{lat}, {lon}")


def _single_axis(pattern: Union[str, re.Pattern, SingleAxisGrammar], name: str) -> SingleAxisGrammar:
    if isinstance(pattern, SingleAxisGrammar):
        return pattern
    return SingleAxisGrammar.from_pattern(pattern, name=name)
