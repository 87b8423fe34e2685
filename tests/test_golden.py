"""
tests/test_golden.py
====================
Golden-State regression tests for the coordinate text parser.

PURPOSE
-------
These tests fix the observable behaviour of ``parse_coordinate`` on the
accepted reference vectors, so any change to the grammars, the sign rules or
the axis-order heuristic shows up as a numeric difference.

REFERENCE VECTORS
-----------------
Each vector is (text, longitude, latitude, elevation) where longitude is the
stored value in [0, 360) and elevation is metres or None.

    175.836666,-39.78,1160ft    ->  175.83666, -39.78,  353 m
    -175.836666,39.78,1160m     ->  184.16334,  39.78, 1160 m
    E175.836666,N39.78          ->  175.83666,  39.78,  absent
    17533.836666,-3930.78       ->  175.56394, -39.513  (degrees, decimal minutes)
    1753300.836666,-393030.78   ->  175.55023, -39.50855 (degrees, minutes, seconds)

Tolerances: 1e-4 degrees, 1 unit of elevation.
"""

import sys
import os

import numpy as np
import pytest

# ---------------------------------------------------------------------------
# Make the source tree importable when pytest is run from the project root
# ---------------------------------------------------------------------------
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from wgscoord.core.parser import parse_coordinate
from wgscoord.elevation import FEET_PER_METRE
from wgscoord.errors import CoordinateFormatError, UnrecognizedUnitError


DEG_TOL = 1e-4
ELEV_TOL = 1.0

WEST_175 = 360.0 - 175.83666

GOLDEN = [
    # Decimal degrees
    ("175.836666,-39.78,1160ft", 175.83666, -39.78, 353.0),
    ("-175.836666,39.78,1160m", WEST_175, 39.78, 1160.0),
    ("175.836666,S39.78,1160", 175.83666, -39.78, 1160.0),
    ("W175.836666,39.78,1160m", WEST_175, 39.78, 1160.0),
    ("E175.836666,N39.78", 175.83666, 39.78, None),
    ("175.836666W,39.78N,1160ft", WEST_175, 39.78, 353.0),
    # Degrees, decimal minutes
    ("17533.836666,-3930.78", 175.56394, -39.513, None),
    # Degrees, minutes, decimal seconds
    ("1753300.836666,-393030.78", 175.55023, -39.50855, None),
]


def check(text, lon, lat, elev):
    coord = parse_coordinate(text)
    np.testing.assert_allclose(coord.longitude, lon, atol=DEG_TOL, err_msg=f"longitude of {text!r}")
    np.testing.assert_allclose(coord.latitude, lat, atol=DEG_TOL, err_msg=f"latitude of {text!r}")
    if elev is None:
        assert coord.elevation is None, f"elevation of {text!r} should be absent"
    else:
        np.testing.assert_allclose(coord.elevation, elev, atol=ELEV_TOL, err_msg=f"elevation of {text!r}")


# ===========================================================================
# 1. REFERENCE VECTORS
# ===========================================================================

class TestGoldenVectors:

    @pytest.mark.parametrize("text,lon,lat,elev", GOLDEN)
    def test_reference_vector(self, text, lon, lat, elev):
        check(text, lon, lat, elev)

    def test_space_separated_fields(self):
        check("175 33.836666 -39 30.78", 175.56394, -39.513, None)

    def test_spaced_elevation_unit(self):
        check("175.836666, -39.78, 1160 FT", 175.83666, -39.78, 353.0)


# ===========================================================================
# 2. SIGN NOTATIONS
# ===========================================================================

class TestSignNotation:

    def test_letter_and_minus_are_equivalent(self):
        a = parse_coordinate("W175.5, 39")
        b = parse_coordinate("-175.5, 39")
        assert a.longitude == pytest.approx(b.longitude)
        assert a.longitude == pytest.approx(184.5)

    def test_lower_case_letters(self):
        check("w175.5, s39", 184.5, -39.0, None)

    def test_plus_sign_is_positive(self):
        check("+175.5, +39", 175.5, 39.0, None)

    def test_prefix_and_suffix_on_one_axis_rejected(self):
        with pytest.raises(CoordinateFormatError):
            parse_coordinate("N39.78S, 175.8")


# ===========================================================================
# 3. AXIS ORDER
# ===========================================================================

class TestAxisOrder:

    def test_north_marker_on_first_value_means_latitude_first(self):
        check("N39.78, E175.836666", 175.83666, 39.78, None)

    def test_south_suffix_on_first_value(self):
        check("39.78S 175.836666E", 175.83666, -39.78, None)

    def test_magnitude_heuristic_latitude_first(self):
        check("-39.78, 175.836666", 175.83666, -39.78, None)

    def test_both_under_ninety_defaults_longitude_first(self):
        check("39.78, 75.5", 39.78, 75.5, None)

    def test_east_marker_does_not_fix_order(self):
        check("39.78, 75.5E", 39.78, 75.5, None)

    def test_west_marker_falls_back_to_magnitude(self):
        check("W50, 100", 100.0, -50.0, None)


# ===========================================================================
# 4. ELEVATION
# ===========================================================================

class TestElevation:

    def test_feet_and_metres_describe_same_height(self):
        metres = parse_coordinate("175.8, -39.7, 1000m").elevation
        feet = parse_coordinate(f"175.8, -39.7, {1000 * FEET_PER_METRE}ft").elevation
        np.testing.assert_allclose(feet, metres, atol=ELEV_TOL)

    def test_unknown_unit_is_fatal(self):
        with pytest.raises(UnrecognizedUnitError, match="yd") as exc:
            parse_coordinate("175.836666,-39.78,1160yd")
        assert exc.value.unit == "yd"

    def test_missing_elevation_is_absent_not_zero(self):
        assert parse_coordinate("175.8, -39.7").elevation is None

    def test_elevation_needs_separator(self):
        with pytest.raises(CoordinateFormatError):
            parse_coordinate("175.8W,39.78N1160")
        check("175.8W,39.78N 1160", 360.0 - 175.8, 39.78, 1160.0)


# ===========================================================================
# 5. ROUND TRIP THROUGH DECIMAL TEXT
# ===========================================================================

class TestDecimalRoundTrip:

    @pytest.mark.parametrize("lon,lat", [(175.836666, -39.78), (-175.836666, 39.78), (0.5, -89.5), (180.0, 0.25)])
    def test_parse_then_format(self, lon, lat):
        text = parse_coordinate(f"{lon}, {lat}").to_decimal()
        out_lon, out_lat = (float(v) for v in text.split(","))
        np.testing.assert_allclose(out_lon, lon % 360.0, atol=DEG_TOL)
        np.testing.assert_allclose(out_lat, lat, atol=DEG_TOL)


# ===========================================================================
# 6. GUARD RAILS
# ===========================================================================

class TestRejected:

    @pytest.mark.parametrize("text", ["", "abc", "175.8", "1234.5, 12", "175.8; -39.7"])
    def test_unrecognised_text(self, text):
        with pytest.raises(CoordinateFormatError) as exc:
            parse_coordinate(text)
        assert exc.value.text == text

    def test_none_rejected(self):
        with pytest.raises(CoordinateFormatError):
            parse_coordinate(None)
