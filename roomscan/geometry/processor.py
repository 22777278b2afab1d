"""
Dimension Processor Module

Turns captured scan surfaces into a RoomDimensions model: per-wall and
per-opening measurements, floor area, ceiling estimate, totals and volume.

Every function here is pure and total. Missing data falls back to defined
values (empty floor, default ceiling height) instead of raising.
"""

import logging
from typing import List, Optional, Sequence

from ..config import Settings
from ..constants import (
    CEILING_AREA_WALL_DIVISOR,
    DEFAULT_CEILING_HEIGHT_M,
    FLOOR_PLANE,
)
from .surface import CapturedScan, Surface
from .dimensions import (
    CeilingDimension,
    FloorDimension,
    OpeningDimension,
    OpeningType,
    RoomDimensions,
    WallDimension,
)
from .polygon import polygon_area, polygon_perimeter, polygon_validity

logger = logging.getLogger(__name__)


def process_walls(surfaces: Sequence[Surface]) -> List[WallDimension]:
    """
    Map wall surfaces to WallDimension, keeping order and count.

    Area is always recomputed as width x height.
    """
    return [
        WallDimension(
            id=surface.identifier,
            width=surface.dimensions.x,
            height=surface.dimensions.y,
            area=surface.dimensions.x * surface.dimensions.y,
            transform=surface.transform,
            confidence=surface.confidence,
            is_curved=surface.is_curved,
            polygon_corners=tuple(surface.polygon_corners),
        )
        for surface in surfaces
    ]


def process_floor(surface: Optional[Surface]) -> FloorDimension:
    """
    Calculate floor measurements.

    The polygon outline (Shoelace in the horizontal X/Z plane) is used only
    when it yields a strictly positive area; otherwise the area falls back
    to the surface's width x depth. Bounding width/length always come from
    the surface dimensions.

    Args:
        surface: The room's floor surface, or None

    Returns:
        FloorDimension (zero-valued when there is no floor)
    """
    if surface is None:
        logger.debug("No floor surface, using empty floor")
        return FloorDimension.empty()

    corners = tuple(surface.polygon_corners)
    area = polygon_area(corners, FLOOR_PLANE)
    bounding_width = surface.dimensions.x
    bounding_length = surface.dimensions.z

    if area <= 0:
        logger.debug(
            f"Floor {surface.identifier}: polygon area unavailable "
            f"({len(corners)} corners), using bounding box"
        )
        area = bounding_width * bounding_length

    return FloorDimension(
        area=area,
        bounding_width=bounding_width,
        bounding_length=bounding_length,
        polygon_corners=corners,
        center=surface.transform.position,
        perimeter=polygon_perimeter(corners, FLOOR_PLANE),
    )


def process_ceiling(
    walls: Sequence[WallDimension],
    default_height: float = DEFAULT_CEILING_HEIGHT_M
) -> CeilingDimension:
    """
    Estimate the ceiling from wall data.

    Note: The ceiling is not measured. Height is the absolute height of the
    first wall only (other walls may disagree in imperfect scans), and area
    is total wall area / 4, which assumes a roughly rectangular room with
    four comparable walls.

    Args:
        walls: Processed walls
        default_height: Height used when there are no walls

    Returns:
        Approximate CeilingDimension with no polygon
    """
    if walls:
        height = abs(walls[0].height)
    else:
        logger.debug(f"No walls, using default ceiling height {default_height} m")
        height = abs(default_height)

    total_wall_area = sum(wall.area for wall in walls)

    return CeilingDimension(
        area=total_wall_area / CEILING_AREA_WALL_DIVISOR,
        height=height,
        polygon_corners=(),
    )


def process_openings(
    surfaces: Sequence[Surface],
    opening_type: OpeningType
) -> List[OpeningDimension]:
    """
    Map door/window surfaces to OpeningDimension, keeping order and count.

    The parent wall id is copied as-is and stays None when the capture could
    not associate the opening with a wall.
    """
    return [
        OpeningDimension(
            id=surface.identifier,
            type=opening_type,
            width=surface.dimensions.x,
            height=surface.dimensions.y,
            area=surface.dimensions.x * surface.dimensions.y,
            transform=surface.transform,
            parent_wall_id=surface.parent_identifier,
        )
        for surface in surfaces
    ]


def process_doors(surfaces: Sequence[Surface]) -> List[OpeningDimension]:
    return process_openings(surfaces, OpeningType.DOOR)


def process_windows(surfaces: Sequence[Surface]) -> List[OpeningDimension]:
    return process_openings(surfaces, OpeningType.WINDOW)


def extract_dimensions(
    walls: Sequence[Surface] = (),
    floors: Sequence[Surface] = (),
    doors: Sequence[Surface] = (),
    windows: Sequence[Surface] = (),
    default_ceiling_height: float = DEFAULT_CEILING_HEIGHT_M
) -> RoomDimensions:
    """
    Extract all room dimensions from pre-partitioned scan surfaces.

    Only the first floor surface is used.

    Args:
        walls: Wall surfaces
        floors: Floor surfaces
        doors: Door surfaces
        windows: Window surfaces
        default_ceiling_height: Ceiling height when there are no walls

    Returns:
        RoomDimensions with totals and volume
    """
    wall_dims = process_walls(walls)
    floor = process_floor(floors[0] if floors else None)
    ceiling = process_ceiling(wall_dims, default_ceiling_height)
    door_dims = process_doors(doors)
    window_dims = process_windows(windows)

    total_wall_area = sum(wall.area for wall in wall_dims)
    total_floor_area = floor.area
    room_volume = total_floor_area * ceiling.height

    logger.debug(
        f"Extracted {len(wall_dims)} walls, {len(door_dims)} doors, "
        f"{len(window_dims)} windows: floor {total_floor_area:.2f} m2, "
        f"walls {total_wall_area:.2f} m2, height {ceiling.height:.2f} m, "
        f"volume {room_volume:.2f} m3"
    )

    return RoomDimensions(
        walls=tuple(wall_dims),
        floor=floor,
        ceiling=ceiling,
        doors=tuple(door_dims),
        windows=tuple(window_dims),
        total_floor_area=total_floor_area,
        total_wall_area=total_wall_area,
        ceiling_height=ceiling.height,
        room_volume=room_volume,
    )


def extract_scan_dimensions(
    scan: CapturedScan,
    default_ceiling_height: float = DEFAULT_CEILING_HEIGHT_M
) -> RoomDimensions:
    """Extract dimensions from a CapturedScan."""
    return extract_dimensions(
        walls=scan.walls,
        floors=scan.floors,
        doors=scan.doors,
        windows=scan.windows,
        default_ceiling_height=default_ceiling_height,
    )


def validate_room_dimensions(
    dimensions: RoomDimensions,
    settings: Optional[Settings] = None
) -> List[str]:
    """
    Validate room dimensions and return warnings.

    Args:
        dimensions: Extracted room dimensions
        settings: Thresholds (defaults when None)

    Returns:
        List of warning messages
    """
    settings = settings or Settings()
    warnings = []

    # Check floor area (only when a floor was captured)
    floor = dimensions.floor
    if floor.area > 0 or floor.has_polygon:
        if dimensions.total_floor_area < settings.min_floor_area_m2:
            warnings.append(
                f"Floor area {dimensions.total_floor_area:.2f} m² is below minimum "
                f"({settings.min_floor_area_m2} m²)"
            )
        if dimensions.total_floor_area > settings.max_floor_area_m2:
            warnings.append(
                f"Floor area {dimensions.total_floor_area:.2f} m² exceeds maximum "
                f"({settings.max_floor_area_m2} m²)"
            )

        reason = polygon_validity(floor.polygon_corners, FLOOR_PLANE)
        if reason:
            warnings.append(f"Floor polygon is invalid: {reason}")

    # Check ceiling height
    if dimensions.ceiling_height < settings.min_ceiling_height_m:
        warnings.append(
            f"Ceiling height {dimensions.ceiling_height:.2f} m is below minimum "
            f"({settings.min_ceiling_height_m} m)"
        )
    if dimensions.ceiling_height > settings.max_ceiling_height_m:
        warnings.append(
            f"Ceiling height {dimensions.ceiling_height:.2f} m exceeds maximum "
            f"({settings.max_ceiling_height_m} m)"
        )

    # Ceiling height comes from the first wall only
    if dimensions.walls:
        heights = [abs(wall.height) for wall in dimensions.walls]
        spread = max(heights) - min(heights)
        if spread > settings.wall_height_spread_tolerance_m:
            warnings.append(
                f"Wall heights vary by {spread:.2f} m; ceiling height is "
                f"approximated from the first wall"
            )

    # Openings must reference a known wall
    for opening in dimensions.openings:
        if opening.parent_wall_id is not None and dimensions.find_wall(opening.parent_wall_id) is None:
            warnings.append(
                f"{opening.type.value.capitalize()} {opening.id} references "
                f"unknown wall {opening.parent_wall_id}"
            )

    return warnings
