"""
Scan Reader Module

Parses exported scan JSON into a CapturedScan.

Expected input schema:
{
  "walls": [
    {
      "identifier": "wall_0",
      "dimensions": [4.0, 2.4, 0.0],
      "transform": [1,0,0,0, 0,1,0,0, 0,0,1,0, 2.0,1.2,0.0,1],
      "confidence": "high",
      "curve": null,
      "polygonCorners": [],
      "parentIdentifier": null
    }
  ],
  "floors": [...], "doors": [...], "windows": [...], "ceilings": [...]
}

``transform`` is 16 column-major values or four columns of four values.
snake_case keys (``polygon_corners``, ``parent_identifier``) are accepted too.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..constants import Confidence, SurfaceCategory
from ..geometry.surface import CapturedScan, Surface, SurfaceCurve
from ..geometry.transform import Transform, Vector3

logger = logging.getLogger(__name__)


class ScanReadError(ValueError):
    """Raised when scan data cannot be parsed into surfaces."""


# JSON key -> surface category
CATEGORY_KEYS = {
    "walls": SurfaceCategory.WALL,
    "floors": SurfaceCategory.FLOOR,
    "doors": SurfaceCategory.DOOR,
    "windows": SurfaceCategory.WINDOW,
    "ceilings": SurfaceCategory.CEILING,
}


def _get(raw: Dict[str, Any], *keys: str, default=None):
    """Return the first present key (camelCase / snake_case variants)."""
    for key in keys:
        if key in raw:
            return raw[key]
    return default


def _parse_vector(value: Any, label: str) -> Vector3:
    try:
        return Vector3.from_iterable(value)
    except (TypeError, ValueError) as e:
        raise ScanReadError(f"Invalid {label}: expected 3 numbers, got {value!r}") from e


def _parse_transform(value: Any) -> Transform:
    if value is None:
        return Transform.identity()

    try:
        if len(value) == 4:
            return Transform.from_columns(value)
        return Transform.from_list(value)
    except (TypeError, ValueError) as e:
        raise ScanReadError(f"Invalid transform: {e}") from e


def _parse_curve(value: Any) -> Optional[SurfaceCurve]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ScanReadError(f"Invalid curve: expected an object, got {type(value).__name__}")

    try:
        return SurfaceCurve(
            start_angle=float(_get(value, "startAngle", "start_angle", default=0.0)),
            end_angle=float(_get(value, "endAngle", "end_angle", default=0.0)),
            radius=float(_get(value, "radius", default=0.0)),
        )
    except (TypeError, ValueError) as e:
        raise ScanReadError(f"Invalid curve: {e}") from e


def _parse_confidence(value: Any) -> str:
    if value is None:
        return Confidence.HIGH

    normalized = str(value).strip().lower()
    if normalized not in Confidence.ALL:
        raise ScanReadError(
            f"Invalid confidence '{value}', expected one of {', '.join(Confidence.ALL)}"
        )
    return normalized


def parse_surface(raw: Dict[str, Any], default_identifier: str = "") -> Surface:
    """
    Parse one surface record.

    Args:
        raw: Surface JSON object
        default_identifier: Identifier used when the record has none

    Returns:
        Surface

    Raises:
        ScanReadError: If a field is missing or malformed
    """
    if not isinstance(raw, dict):
        raise ScanReadError(f"Surface must be an object, got {type(raw).__name__}")

    if "dimensions" not in raw:
        raise ScanReadError("Surface is missing 'dimensions'")

    identifier = _get(raw, "identifier", "id", default=None)
    if identifier is None:
        identifier = default_identifier

    corners_raw = _get(raw, "polygonCorners", "polygon_corners", default=None) or []
    corners = tuple(
        _parse_vector(corner, f"polygon corner {i}")
        for i, corner in enumerate(corners_raw)
    )

    parent = _get(raw, "parentIdentifier", "parent_identifier", default=None)

    return Surface(
        identifier=str(identifier),
        dimensions=_parse_vector(raw["dimensions"], "dimensions"),
        transform=_parse_transform(raw.get("transform")),
        confidence=_parse_confidence(raw.get("confidence")),
        curve=_parse_curve(raw.get("curve")),
        polygon_corners=corners,
        parent_identifier=str(parent) if parent is not None else None,
    )


def _parse_category(raw: Dict[str, Any], key: str) -> Tuple[Surface, ...]:
    records = raw.get(key, [])
    if records is None:
        return ()
    if not isinstance(records, list):
        logger.warning(
            f"Scan field '{key}' should be a list, got {type(records).__name__}; ignoring"
        )
        return ()

    category = CATEGORY_KEYS[key]
    surfaces: List[Surface] = []
    for index, record in enumerate(records):
        try:
            surfaces.append(parse_surface(record, f"{category}_{index}"))
        except ScanReadError as e:
            raise ScanReadError(f"{key}[{index}]: {e}") from e

    return tuple(surfaces)


def parse_scan(raw: Dict[str, Any]) -> CapturedScan:
    """
    Parse a scan JSON object into a CapturedScan.

    Raises:
        ScanReadError: If the data is not an object or a surface is malformed
    """
    if not isinstance(raw, dict):
        raise ScanReadError(f"Scan data must be an object, got {type(raw).__name__}")

    scan = CapturedScan(
        walls=_parse_category(raw, "walls"),
        floors=_parse_category(raw, "floors"),
        doors=_parse_category(raw, "doors"),
        windows=_parse_category(raw, "windows"),
        ceilings=_parse_category(raw, "ceilings"),
    )

    logger.debug(
        f"Parsed scan: {len(scan.walls)} walls, {len(scan.floors)} floors, "
        f"{len(scan.doors)} doors, {len(scan.windows)} windows"
    )
    return scan


def load_scan(path: Union[str, Path]) -> CapturedScan:
    """
    Load a scan from a JSON file.

    Args:
        path: Path to the scan JSON

    Returns:
        CapturedScan

    Raises:
        ScanReadError: If the file cannot be read or parsed
    """
    scan_path = Path(path)
    try:
        with open(scan_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise ScanReadError(f"Cannot read scan file {scan_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ScanReadError(f"Invalid JSON in {scan_path}: {e}") from e

    return parse_scan(raw)
