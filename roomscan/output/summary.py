"""
Summary Module

Human-readable summary lines for a room, rendered in the display unit.
"""

from typing import List, Optional

from ..geometry.dimensions import RoomDimensions
from ..units.converter import MeasurementFormatter


def format_summary(
    dimensions: RoomDimensions,
    formatter: Optional[MeasurementFormatter] = None
) -> List[str]:
    """
    Summary lines, e.g. "Floor Area: 12.00 m²".

    Args:
        dimensions: Extracted room dimensions
        formatter: Display unit and precision (meters, 2 decimals by default)

    Returns:
        List of "Label: value" strings
    """
    formatter = formatter or MeasurementFormatter()

    lines = [
        f"Floor Area: {formatter.format_area(dimensions.total_floor_area)}",
        f"Wall Area: {formatter.format_area(dimensions.total_wall_area)}",
        f"Ceiling Height: {formatter.format(dimensions.ceiling_height)}",
        f"Volume: {formatter.format_volume(dimensions.room_volume)}",
        f"Walls: {dimensions.wall_count}",
        f"Doors: {dimensions.door_count}",
        f"Windows: {dimensions.window_count}",
    ]

    for index, wall in enumerate(dimensions.walls, start=1):
        curved = " (curved)" if wall.is_curved else ""
        lines.append(
            f"  Wall {index}: {formatter.format(wall.width)} x "
            f"{formatter.format(wall.height)} "
            f"({formatter.format_area(wall.area)}){curved}"
        )

    return lines
