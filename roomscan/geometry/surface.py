"""
Surface Data Structure Module

Raw planar detections handed over by the capture session: walls, floors,
ceilings, doors and windows, already partitioned by category.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..constants import Confidence
from .transform import Transform, Vector3


@dataclass(frozen=True)
class SurfaceCurve:
    """Curvature marker of a curved wall (angles in radians)."""
    start_angle: float
    end_angle: float
    radius: float


@dataclass(frozen=True)
class Surface:
    """
    A single planar scan detection.

    ``dimensions`` is width (x) x height (y) x depth (z) in meters, aligned
    to the surface's local pose. Openings carry the identifier of the wall
    they puncture in ``parent_identifier`` when the capture system could
    associate one.
    """
    identifier: str
    dimensions: Vector3
    transform: Transform = field(default_factory=Transform.identity)
    confidence: str = Confidence.HIGH
    curve: Optional[SurfaceCurve] = None
    polygon_corners: Tuple[Vector3, ...] = ()
    parent_identifier: Optional[str] = None

    @property
    def is_curved(self) -> bool:
        return self.curve is not None


@dataclass(frozen=True)
class CapturedScan:
    """A finalized scan, one tuple of surfaces per category."""
    walls: Tuple[Surface, ...] = ()
    floors: Tuple[Surface, ...] = ()
    doors: Tuple[Surface, ...] = ()
    windows: Tuple[Surface, ...] = ()
    ceilings: Tuple[Surface, ...] = ()

    @property
    def surface_count(self) -> int:
        return (
            len(self.walls) + len(self.floors) + len(self.doors)
            + len(self.windows) + len(self.ceilings)
        )
