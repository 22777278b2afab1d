"""
Unit Conversion Tests

Tests for unit parsing, conversion and display formatting.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from roomscan.geometry import Surface, Vector3, extract_dimensions
from roomscan.units import (
    MeasurementFormatter,
    MeasurementUnit,
    convert_area,
    convert_length,
    convert_volume,
    format_area,
    format_feet_inches,
    format_length,
    format_volume,
)


class TestMeasurementUnit:
    """Tests for MeasurementUnit parsing and factors."""

    def test_from_string(self):
        assert MeasurementUnit.from_string("m") == MeasurementUnit.METERS
        assert MeasurementUnit.from_string("FT") == MeasurementUnit.FEET
        assert MeasurementUnit.from_string(" Centimeters ") == MeasurementUnit.CENTIMETERS
        assert MeasurementUnit.from_string("inch") == MeasurementUnit.INCHES
        assert MeasurementUnit.from_string("metric") == MeasurementUnit.METERS
        assert MeasurementUnit.from_string("imperial") == MeasurementUnit.FEET
        print("  [PASS] Unit parsing")

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            MeasurementUnit.from_string("furlong")
        print("  [PASS] Unknown unit rejected")

    def test_factors(self):
        assert MeasurementUnit.METERS.from_meters == 1.0
        assert abs(MeasurementUnit.FEET.from_meters - 3.28084) < 1e-5
        assert abs(MeasurementUnit.CENTIMETERS.from_meters - 100.0) < 1e-9
        assert abs(MeasurementUnit.INCHES.from_meters - 39.3701) < 1e-4
        print("  [PASS] Conversion factors")

    def test_names(self):
        assert MeasurementUnit.FEET.abbreviation == "ft"
        assert MeasurementUnit.FEET.display_name == "Feet"
        print("  [PASS] Unit names")


class TestConversion:
    """Tests for length/area/volume conversion."""

    def test_length(self):
        assert abs(convert_length(1.0, MeasurementUnit.FEET) - 3.28084) < 1e-5
        assert abs(convert_length(2.5, MeasurementUnit.CENTIMETERS) - 250.0) < 1e-9
        print("  [PASS] Length conversion")

    def test_area_uses_square_factor(self):
        assert abs(convert_area(1.0, MeasurementUnit.FEET) - 10.7639) < 1e-4
        assert abs(convert_area(1.0, MeasurementUnit.CENTIMETERS) - 10000.0) < 1e-6
        print("  [PASS] Area conversion")

    def test_volume_uses_cube_factor(self):
        assert abs(convert_volume(1.0, MeasurementUnit.FEET) - 35.3147) < 1e-4
        print("  [PASS] Volume conversion")

    def test_round_trip(self):
        for unit in MeasurementUnit:
            for value in (0.0, 0.75, 3.0, 12.345):
                length = convert_length(value, unit) * unit.to_meters
                area = convert_area(value, unit) * unit.to_meters ** 2
                volume = convert_volume(value, unit) * unit.to_meters ** 3
                assert abs(length - value) < 1e-4
                assert abs(area - value) < 1e-4
                assert abs(volume - value) < 1e-4
        print("  [PASS] Round trip")


class TestFormatting:
    """Tests for formatted strings."""

    def test_metric(self):
        assert format_length(3.0) == "3.00 m"
        assert format_area(12.0) == "12.00 m²"
        assert format_volume(28.8) == "28.80 m³"
        print("  [PASS] Metric formatting")

    def test_imperial(self):
        assert format_length(3.0, MeasurementUnit.FEET) == "9.84 ft"
        assert format_area(12.0, MeasurementUnit.FEET, 1) == "129.2 ft²"
        assert format_length(1.0, MeasurementUnit.INCHES, 0) == "39 in"
        print("  [PASS] Imperial formatting")

    def test_formatter_matches_room_helpers(self):
        walls = [Surface(identifier="a", dimensions=Vector3(3.0, 2.4, 0.0))]
        dims = extract_dimensions(walls=walls)

        for unit in MeasurementUnit:
            for decimals in (0, 2, 4):
                formatter = MeasurementFormatter(unit, decimals)
                assert formatter.format(3.7) == dims.format(3.7, unit, decimals)
                assert formatter.format_area(12.5) == dims.format_area(12.5, unit, decimals)
                assert formatter.format_volume(30.0) == dims.format_volume(30.0, unit, decimals)
        print("  [PASS] Formatter matches room helpers")

    def test_formatter_defaults(self):
        formatter = MeasurementFormatter()
        assert formatter.format(2.4) == "2.40 m"
        assert MeasurementFormatter.from_strings("imperial", 1).format(1.0) == "3.3 ft"
        print("  [PASS] Formatter defaults")

    def test_negative_decimals(self):
        with pytest.raises(ValueError):
            MeasurementFormatter(MeasurementUnit.METERS, -1)
        print("  [PASS] Negative decimals rejected")

    def test_feet_inches(self):
        assert format_feet_inches(3.048) == "10'-0\""
        assert format_feet_inches(3.2004) == "10'-6\""
        assert format_feet_inches(0.3) == "0'-11.8\""
        # 11.97 inches rounds up to the next foot
        assert format_feet_inches(0.3040) == "1'-0\""
        print("  [PASS] Feet and inches")

    def test_negative_feet_inches(self):
        assert format_feet_inches(-0.5) == "-1'-7.7\""
        assert format_feet_inches(-3.2004) == "-10'-6\""
        assert format_feet_inches(-0.3040) == "-1'-0\""
        # Nothing left to sign after rounding
        assert format_feet_inches(-0.001) == "0'-0\""
        print("  [PASS] Negative feet and inches")
