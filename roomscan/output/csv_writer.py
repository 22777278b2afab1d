"""
CSV Writer Module

Writes one row per wall, door and window.
"""

import csv
import logging
from pathlib import Path
from typing import List

from ..geometry.dimensions import RoomDimensions

logger = logging.getLogger(__name__)


def csv_header() -> List[str]:
    """Return CSV header row (matches to_csv_row on walls and openings)."""
    return [
        "surface_id",
        "surface_type",
        "width_m",
        "height_m",
        "area_m2",
        "is_curved",
        "confidence",
        "parent_wall_id",
    ]


def generate_csv_filename(input_file: str, output_dir: str) -> str:
    """
    Generate the CSV output path for an input scan.

    Example: ("scans/kitchen.json", "out") -> "out/kitchen_surfaces.csv"
    """
    stem = Path(input_file).stem
    return str(Path(output_dir) / f"{stem}_surfaces.csv")


def write_surfaces_to_csv(dimensions: RoomDimensions, output_path: str) -> str:
    """
    Write walls, doors and windows to CSV.

    Args:
        dimensions: Extracted room dimensions
        output_path: CSV file path

    Returns:
        Path of the written file
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(csv_header())
        for wall in dimensions.walls:
            writer.writerow(wall.to_csv_row())
        for opening in dimensions.openings:
            writer.writerow(opening.to_csv_row())

    row_count = dimensions.wall_count + dimensions.door_count + dimensions.window_count
    logger.debug(f"Wrote {row_count} surfaces to CSV: {path}")
    return str(path)
