"""
Room Dimensions Data Structure Module

Immutable measurement records produced by the dimension extraction engine.
All values are metric: meters, square meters, cubic meters.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..constants import DEFAULT_DECIMALS, EXPORT_DECIMALS
from ..units.converter import (
    MeasurementUnit,
    format_area,
    format_length,
    format_volume,
)
from .transform import Transform, Vector3


class OpeningType(Enum):
    """Kind of opening cut into a wall."""
    DOOR = "door"
    WINDOW = "window"
    OPENING = "opening"


@dataclass(frozen=True)
class WallDimension:
    """Measurements of one captured wall."""
    id: str
    width: float
    height: float
    area: float
    transform: Transform
    confidence: str
    is_curved: bool
    polygon_corners: Tuple[Vector3, ...] = ()

    @property
    def position(self) -> Vector3:
        return self.transform.position

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "width_m": round(self.width, EXPORT_DECIMALS),
            "height_m": round(self.height, EXPORT_DECIMALS),
            "area_m2": round(self.area, EXPORT_DECIMALS),
            "confidence": self.confidence,
            "is_curved": self.is_curved,
            "position": self.position.to_list(),
            "orientation_deg": round(self.transform.yaw_degrees, 2),
        }

    def to_csv_row(self) -> List[Any]:
        return [
            self.id,
            "wall",
            round(self.width, EXPORT_DECIMALS),
            round(self.height, EXPORT_DECIMALS),
            round(self.area, EXPORT_DECIMALS),
            self.is_curved,
            self.confidence,
            "",
        ]


@dataclass(frozen=True)
class FloorDimension:
    """
    Measurements of the floor.

    ``area`` is the polygon area when the outline yields a positive area,
    otherwise ``bounding_width * bounding_length``.
    """
    area: float
    bounding_width: float
    bounding_length: float
    polygon_corners: Tuple[Vector3, ...] = ()
    center: Vector3 = Vector3(0.0, 0.0, 0.0)
    perimeter: float = 0.0

    @classmethod
    def empty(cls) -> "FloorDimension":
        """Zero-valued floor used when the scan has no floor surface."""
        return cls(area=0.0, bounding_width=0.0, bounding_length=0.0)

    @property
    def has_polygon(self) -> bool:
        return len(self.polygon_corners) > 0


@dataclass(frozen=True)
class CeilingDimension:
    """
    Estimated ceiling measurements.

    Not captured directly: ``height`` comes from the first wall and ``area``
    is a rough fraction of the total wall area. Both are approximations.
    """
    area: float
    height: float
    polygon_corners: Tuple[Vector3, ...] = ()


@dataclass(frozen=True)
class OpeningDimension:
    """Measurements of a door, window or generic opening."""
    id: str
    type: OpeningType
    width: float
    height: float
    area: float
    transform: Transform
    parent_wall_id: Optional[str] = None

    @property
    def position(self) -> Vector3:
        return self.transform.position

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "width_m": round(self.width, EXPORT_DECIMALS),
            "height_m": round(self.height, EXPORT_DECIMALS),
            "area_m2": round(self.area, EXPORT_DECIMALS),
            "parent_wall_id": self.parent_wall_id,
            "position": self.position.to_list(),
        }

    def to_csv_row(self) -> List[Any]:
        return [
            self.id,
            self.type.value,
            round(self.width, EXPORT_DECIMALS),
            round(self.height, EXPORT_DECIMALS),
            round(self.area, EXPORT_DECIMALS),
            False,
            "",
            self.parent_wall_id or "",
        ]


@dataclass(frozen=True)
class RoomDimensions:
    """
    Complete measurement set for one scanned room.

    Built once per extraction and never mutated afterwards.
    """
    walls: Tuple[WallDimension, ...]
    floor: FloorDimension
    ceiling: CeilingDimension
    doors: Tuple[OpeningDimension, ...]
    windows: Tuple[OpeningDimension, ...]
    total_floor_area: float
    total_wall_area: float
    ceiling_height: float
    room_volume: float

    # Summary statistics
    @property
    def wall_count(self) -> int:
        return len(self.walls)

    @property
    def door_count(self) -> int:
        return len(self.doors)

    @property
    def window_count(self) -> int:
        return len(self.windows)

    @property
    def openings(self) -> Tuple[OpeningDimension, ...]:
        return self.doors + self.windows

    @property
    def net_wall_area(self) -> float:
        """Wall area minus doors and windows, never below zero."""
        opening_area = sum(opening.area for opening in self.openings)
        return max(0.0, self.total_wall_area - opening_area)

    def find_wall(self, wall_id: Optional[str]) -> Optional[WallDimension]:
        """Resolve an opening's parent wall id against the wall list."""
        if wall_id is None:
            return None
        for wall in self.walls:
            if wall.id == wall_id:
                return wall
        return None

    def openings_for_wall(self, wall_id: str) -> List[OpeningDimension]:
        return [o for o in self.openings if o.parent_wall_id == wall_id]

    # Display helpers (shared with MeasurementFormatter)
    def format(
        self,
        meters: float,
        unit: MeasurementUnit,
        decimals: int = DEFAULT_DECIMALS
    ) -> str:
        return format_length(meters, unit, decimals)

    def format_area(
        self,
        square_meters: float,
        unit: MeasurementUnit,
        decimals: int = DEFAULT_DECIMALS
    ) -> str:
        return format_area(square_meters, unit, decimals)

    def format_volume(
        self,
        cubic_meters: float,
        unit: MeasurementUnit,
        decimals: int = DEFAULT_DECIMALS
    ) -> str:
        return format_volume(cubic_meters, unit, decimals)

    def to_dict(self) -> Dict[str, Any]:
        """Convert dimensions to dictionary for JSON serialization."""
        return {
            "total_floor_area_m2": round(self.total_floor_area, EXPORT_DECIMALS),
            "total_wall_area_m2": round(self.total_wall_area, EXPORT_DECIMALS),
            "net_wall_area_m2": round(self.net_wall_area, EXPORT_DECIMALS),
            "ceiling_height_m": round(self.ceiling_height, EXPORT_DECIMALS),
            "ceiling_area_m2": round(self.ceiling.area, EXPORT_DECIMALS),
            "room_volume_m3": round(self.room_volume, EXPORT_DECIMALS),
            "wall_count": self.wall_count,
            "door_count": self.door_count,
            "window_count": self.window_count,
            "floor": {
                "area_m2": round(self.floor.area, EXPORT_DECIMALS),
                "bounding_width_m": round(self.floor.bounding_width, EXPORT_DECIMALS),
                "bounding_length_m": round(self.floor.bounding_length, EXPORT_DECIMALS),
                "perimeter_m": round(self.floor.perimeter, EXPORT_DECIMALS),
                "center": self.floor.center.to_list(),
                "polygon_corners": [c.to_list() for c in self.floor.polygon_corners],
            },
            "walls": [wall.to_dict() for wall in self.walls],
            "doors": [door.to_dict() for door in self.doors],
            "windows": [window.to_dict() for window in self.windows],
        }
