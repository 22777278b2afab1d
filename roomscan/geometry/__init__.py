# Room geometry and dimension extraction module

from .transform import (
    Vector3,
    Transform,
)

from .polygon import (
    polygon_area,
    polygon_perimeter,
    bounding_box,
    polygon_validity,
)

from .surface import (
    Surface,
    SurfaceCurve,
    CapturedScan,
)

from .dimensions import (
    OpeningType,
    WallDimension,
    FloorDimension,
    CeilingDimension,
    OpeningDimension,
    RoomDimensions,
)

from .processor import (
    process_walls,
    process_floor,
    process_ceiling,
    process_openings,
    process_doors,
    process_windows,
    extract_dimensions,
    extract_scan_dimensions,
    validate_room_dimensions,
)

__all__ = [
    # Transform
    "Vector3",
    "Transform",
    # Polygon
    "polygon_area",
    "polygon_perimeter",
    "bounding_box",
    "polygon_validity",
    # Surface
    "Surface",
    "SurfaceCurve",
    "CapturedScan",
    # Dimensions
    "OpeningType",
    "WallDimension",
    "FloorDimension",
    "CeilingDimension",
    "OpeningDimension",
    "RoomDimensions",
    # Processor
    "process_walls",
    "process_floor",
    "process_ceiling",
    "process_openings",
    "process_doors",
    "process_windows",
    "extract_dimensions",
    "extract_scan_dimensions",
    "validate_room_dimensions",
]
