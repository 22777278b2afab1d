"""
JSON Writer Module

Writes extracted room dimensions to a JSON export file.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..constants import EXPORT_DECIMALS, PIPELINE_VERSION
from ..geometry.dimensions import RoomDimensions
from .report_payload import format_scan_date

logger = logging.getLogger(__name__)


def generate_json_filename(input_file: str, output_dir: str) -> str:
    """
    Generate the JSON output path for an input scan.

    Example: ("scans/kitchen.json", "out") -> "out/kitchen_dimensions.json"
    """
    stem = Path(input_file).stem
    return str(Path(output_dir) / f"{stem}_dimensions.json")


def build_export_json(
    dimensions: RoomDimensions,
    input_file: str = "",
    warnings: Optional[List[str]] = None,
    export_date: Optional[datetime] = None
) -> Dict[str, Any]:
    """
    Build the complete export structure.

    Args:
        dimensions: Extracted room dimensions
        input_file: Source scan file name
        warnings: Validation / completeness warnings
        export_date: Export timestamp (defaults to now)

    Returns:
        Dictionary with metadata, roomDimensions and surfaces sections
    """
    def r(value: float) -> float:
        return round(value, EXPORT_DECIMALS)

    return {
        "metadata": {
            "pipeline_version": PIPELINE_VERSION,
            "input_file": input_file,
            "export_date": format_scan_date(export_date),
            "wall_count": dimensions.wall_count,
            "door_count": dimensions.door_count,
            "window_count": dimensions.window_count,
            "warnings": list(warnings or []),
        },
        "roomDimensions": {
            "floorAreaM2": r(dimensions.total_floor_area),
            "wallAreaM2": r(dimensions.total_wall_area),
            "netWallAreaM2": r(dimensions.net_wall_area),
            "ceilingHeightM": r(dimensions.ceiling_height),
            "ceilingAreaM2": r(dimensions.ceiling.area),
            "volumeM3": r(dimensions.room_volume),
        },
        "surfaces": {
            "walls": [
                {
                    "id": wall.id,
                    "widthM": r(wall.width),
                    "heightM": r(wall.height),
                    "areaM2": r(wall.area),
                    "isCurved": wall.is_curved,
                    "confidence": wall.confidence,
                }
                for wall in dimensions.walls
            ],
            "doors": [
                {
                    "id": door.id,
                    "type": door.type.value,
                    "widthM": r(door.width),
                    "heightM": r(door.height),
                    "areaM2": r(door.area),
                    "parentWallId": door.parent_wall_id,
                }
                for door in dimensions.doors
            ],
            "windows": [
                {
                    "id": window.id,
                    "type": window.type.value,
                    "widthM": r(window.width),
                    "heightM": r(window.height),
                    "areaM2": r(window.area),
                    "parentWallId": window.parent_wall_id,
                }
                for window in dimensions.windows
            ],
        },
        "detail": dimensions.to_dict(),
    }


def write_json(data: Dict[str, Any], output_path: str) -> str:
    """Write a dictionary as pretty-printed, key-sorted JSON."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True, ensure_ascii=False)

    return str(path)


def write_dimensions_to_json(
    dimensions: RoomDimensions,
    output_path: str,
    input_file: str = "",
    warnings: Optional[List[str]] = None
) -> str:
    """
    Write room dimensions to a JSON export file.

    Returns:
        Path of the written file
    """
    data = build_export_json(dimensions, input_file=input_file, warnings=warnings)
    path = write_json(data, output_path)
    logger.debug(f"Wrote dimensions JSON: {path}")
    return path
