# Unit conversion and display formatting module

from .converter import (
    MeasurementUnit,
    MeasurementFormatter,
    convert,
    convert_length,
    convert_area,
    convert_volume,
    format_length,
    format_area,
    format_volume,
    format_feet_inches,
)

__all__ = [
    "MeasurementUnit",
    "MeasurementFormatter",
    "convert",
    "convert_length",
    "convert_area",
    "convert_volume",
    "format_length",
    "format_area",
    "format_volume",
    "format_feet_inches",
]
