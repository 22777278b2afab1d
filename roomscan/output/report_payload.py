"""
Report Payload Module

Builds the report upload payload from RoomDimensions. Field names are the
upload API's camelCase names; all values are metric.
"""

import logging
import string
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from ..geometry.dimensions import OpeningDimension, RoomDimensions

logger = logging.getLogger(__name__)


def generate_wall_names(count: int) -> List[str]:
    """
    Default display names for walls.

    Examples:
        3 -> ["Wall A", "Wall B", "Wall C"]
        Walls past Z are numbered: the 27th wall is "Wall 27".
    """
    letters = string.ascii_uppercase
    return [
        f"Wall {letters[i]}" if i < len(letters) else f"Wall {i + 1}"
        for i in range(count)
    ]


def format_scan_date(moment: Optional[datetime] = None) -> str:
    """ISO 8601 UTC timestamp with milliseconds, e.g. 2024-05-01T12:00:00.000Z."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_opening_payload(opening: OpeningDimension) -> Dict[str, Any]:
    return {
        "type": opening.type.value,
        "widthM": opening.width,
        "heightM": opening.height,
        "areaM2": opening.area,
    }


def build_report_payload(
    dimensions: RoomDimensions,
    wall_names: Optional[Sequence[str]] = None,
    scan_date: Optional[datetime] = None
) -> Dict[str, Any]:
    """
    Build the report upload payload.

    Args:
        dimensions: Extracted room dimensions
        wall_names: One display name per wall (defaults to "Wall A", ...)
        scan_date: Scan timestamp (defaults to now)

    Returns:
        JSON-serializable payload dictionary

    Raises:
        ValueError: If wall_names does not match the wall count
    """
    if wall_names is None:
        wall_names = generate_wall_names(dimensions.wall_count)
    elif len(wall_names) != dimensions.wall_count:
        raise ValueError(
            f"Expected {dimensions.wall_count} wall names, got {len(wall_names)}"
        )

    walls = [
        {
            "name": name,
            "widthM": wall.width,
            "heightM": wall.height,
            "areaM2": wall.area,
            "isCurved": wall.is_curved,
        }
        for name, wall in zip(wall_names, dimensions.walls)
    ]

    payload = {
        "scanDate": format_scan_date(scan_date),
        "floorAreaM2": dimensions.total_floor_area,
        "wallAreaM2": dimensions.total_wall_area,
        "ceilingHeightM": dimensions.ceiling_height,
        "volumeM3": dimensions.room_volume,
        "wallCount": dimensions.wall_count,
        "doorCount": dimensions.door_count,
        "windowCount": dimensions.window_count,
        "walls": walls,
        "doors": [build_opening_payload(door) for door in dimensions.doors],
        "windows": [build_opening_payload(window) for window in dimensions.windows],
    }

    logger.debug(
        f"Report payload: {len(walls)} walls, {dimensions.door_count} doors, "
        f"{dimensions.window_count} windows"
    )
    return payload
