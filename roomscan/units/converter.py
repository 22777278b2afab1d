"""
Unit Converter Module

Conversion and formatting of meter-based measurements for display.

Every formatting path (the standalone MeasurementFormatter and the helpers
on RoomDimensions) goes through the module-level functions here, so the
same input always renders to the same string.
"""

from dataclasses import dataclass
from enum import Enum

from ..constants import (
    AREA_SUFFIX,
    DEFAULT_DECIMALS,
    INCHES_PER_FOOT,
    METERS_PER_CENTIMETER,
    METERS_PER_FOOT,
    METERS_PER_INCH,
    VOLUME_SUFFIX,
)


class MeasurementUnit(Enum):
    """Display units; the value is the unit abbreviation."""
    METERS = "m"
    FEET = "ft"
    CENTIMETERS = "cm"
    INCHES = "in"

    @classmethod
    def from_string(cls, value: str) -> "MeasurementUnit":
        """
        Parse a unit from an abbreviation, a name or a unit system.

        Examples:
            >>> MeasurementUnit.from_string("ft")
            MeasurementUnit.FEET
            >>> MeasurementUnit.from_string("Centimeters")
            MeasurementUnit.CENTIMETERS
            >>> MeasurementUnit.from_string("imperial")
            MeasurementUnit.FEET

        Raises:
            ValueError: If the unit is not recognised
        """
        normalized = value.strip().lower()

        try:
            return cls(normalized)
        except ValueError:
            pass

        aliases = {
            "meter": cls.METERS,
            "meters": cls.METERS,
            "metric": cls.METERS,
            "foot": cls.FEET,
            "feet": cls.FEET,
            "imperial": cls.FEET,
            "centimeter": cls.CENTIMETERS,
            "centimeters": cls.CENTIMETERS,
            "inch": cls.INCHES,
            "inches": cls.INCHES,
        }
        if normalized in aliases:
            return aliases[normalized]

        raise ValueError(f"Unknown measurement unit: {value}")

    @property
    def abbreviation(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def to_meters(self) -> float:
        """Meters per one of this unit."""
        return _METERS_PER_UNIT[self]

    @property
    def from_meters(self) -> float:
        """This unit per meter (feet ~3.28084, inches ~39.3701)."""
        return 1.0 / _METERS_PER_UNIT[self]


_METERS_PER_UNIT = {
    MeasurementUnit.METERS: 1.0,
    MeasurementUnit.FEET: METERS_PER_FOOT,
    MeasurementUnit.CENTIMETERS: METERS_PER_CENTIMETER,
    MeasurementUnit.INCHES: METERS_PER_INCH,
}


# =============================================================================
# CONVERSION
# =============================================================================

def convert(value: float, unit: MeasurementUnit, power: int = 1) -> float:
    """
    Convert a meter-based quantity to ``unit``.

    Args:
        value: Value in meters (power 1), square meters (2) or cubic meters (3)
        unit: Target unit
        power: Dimension of the quantity

    Returns:
        Value in the target unit raised to the same power
    """
    return value * unit.from_meters ** power


def convert_length(meters: float, unit: MeasurementUnit) -> float:
    return convert(meters, unit, 1)


def convert_area(square_meters: float, unit: MeasurementUnit) -> float:
    return convert(square_meters, unit, 2)


def convert_volume(cubic_meters: float, unit: MeasurementUnit) -> float:
    return convert(cubic_meters, unit, 3)


# =============================================================================
# FORMATTING
# =============================================================================

def _render(value: float, abbreviation: str, decimals: int) -> str:
    return f"{value:.{decimals}f} {abbreviation}"


def format_length(
    meters: float,
    unit: MeasurementUnit = MeasurementUnit.METERS,
    decimals: int = DEFAULT_DECIMALS
) -> str:
    """Format a length, e.g. ``"3.00 m"`` or ``"9.84 ft"``."""
    return _render(convert_length(meters, unit), unit.abbreviation, decimals)


def format_area(
    square_meters: float,
    unit: MeasurementUnit = MeasurementUnit.METERS,
    decimals: int = DEFAULT_DECIMALS
) -> str:
    """Format an area, e.g. ``"12.00 m²"``."""
    return _render(
        convert_area(square_meters, unit),
        unit.abbreviation + AREA_SUFFIX,
        decimals,
    )


def format_volume(
    cubic_meters: float,
    unit: MeasurementUnit = MeasurementUnit.METERS,
    decimals: int = DEFAULT_DECIMALS
) -> str:
    """Format a volume, e.g. ``"28.80 m³"``."""
    return _render(
        convert_volume(cubic_meters, unit),
        unit.abbreviation + VOLUME_SUFFIX,
        decimals,
    )


def format_feet_inches(meters: float) -> str:
    """
    Format a length as architectural feet and inches (e.g., 10'-6").

    Args:
        meters: Length in meters

    Returns:
        Formatted string like "10'-6"" (negative lengths get a leading "-")
    """
    length_feet = convert_length(abs(meters), MeasurementUnit.FEET)
    feet = int(length_feet)
    remaining_inches = (length_feet - feet) * INCHES_PER_FOOT

    if remaining_inches < 0.1:
        text = f"{feet}'-0\""
    elif abs(remaining_inches - round(remaining_inches)) < 0.1:
        inches = int(round(remaining_inches))
        if inches == INCHES_PER_FOOT:
            text = f"{feet + 1}'-0\""
        else:
            text = f"{feet}'-{inches}\""
    else:
        text = f"{feet}'-{remaining_inches:.1f}\""

    if meters < 0 and text != "0'-0\"":
        return "-" + text
    return text


@dataclass(frozen=True)
class MeasurementFormatter:
    """Display configuration: target unit and decimal places."""
    unit: MeasurementUnit = MeasurementUnit.METERS
    decimals: int = DEFAULT_DECIMALS

    def __post_init__(self):
        if self.decimals < 0:
            raise ValueError(f"Decimals must be non-negative: {self.decimals}")

    @classmethod
    def from_strings(cls, unit: str, decimals: int = DEFAULT_DECIMALS) -> "MeasurementFormatter":
        return cls(MeasurementUnit.from_string(unit), decimals)

    def format(self, meters: float) -> str:
        return format_length(meters, self.unit, self.decimals)

    def format_area(self, square_meters: float) -> str:
        return format_area(square_meters, self.unit, self.decimals)

    def format_volume(self, cubic_meters: float) -> str:
        return format_volume(cubic_meters, self.unit, self.decimals)
