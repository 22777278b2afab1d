"""
Polygon Geometry Module

Area, perimeter, bounding box and validity checks for ordered 3D corner
lists projected onto one of the axis planes.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np
from shapely.geometry import Polygon
from shapely.validation import explain_validity

from ..constants import FLOOR_PLANE, MIN_POLYGON_CORNERS, PLANE_AXES
from .transform import Vector3

logger = logging.getLogger(__name__)


def _project(points: Sequence[Sequence[float]], plane: str) -> np.ndarray:
    """Project 3D points onto the two axes spanning ``plane`` -> (n, 2) array."""
    try:
        axes = PLANE_AXES[plane]
    except KeyError:
        raise ValueError(
            f"Unknown plane '{plane}', expected one of {sorted(PLANE_AXES)}"
        ) from None

    coords = np.asarray(points, dtype=float).reshape(-1, 3)
    return coords[:, axes]


def polygon_area(
    points: Sequence[Sequence[float]],
    plane: str = FLOOR_PLANE
) -> float:
    """
    Calculate polygon area using the Shoelace formula.

    The corners are projected onto ``plane`` (axis-A, axis-B) and

        area = |sum(A[i] * B[i+1] - A[i+1] * B[i])| / 2

    with indices taken modulo n.

    Args:
        points: Ordered polygon corners (x, y, z)
        plane: Projection plane - "xz" (floor plan), "xy" or "yz"

    Returns:
        Area in square units, 0.0 for fewer than 3 corners
    """
    if len(points) < MIN_POLYGON_CORNERS:
        return 0.0

    projected = _project(points, plane)
    a = projected[:, 0]
    b = projected[:, 1]

    twice_area = np.dot(a, np.roll(b, -1)) - np.dot(np.roll(a, -1), b)
    return float(abs(twice_area) / 2.0)


def polygon_perimeter(
    points: Sequence[Sequence[float]],
    plane: str = FLOOR_PLANE
) -> float:
    """
    Calculate the closed perimeter of a polygon in ``plane``.

    Returns:
        Perimeter length, 0.0 for fewer than 3 corners
    """
    if len(points) < MIN_POLYGON_CORNERS:
        return 0.0

    projected = _project(points, plane)
    edges = np.roll(projected, -1, axis=0) - projected
    return float(np.sum(np.linalg.norm(edges, axis=1)))


def bounding_box(
    points: Sequence[Sequence[float]]
) -> Optional[Tuple[Vector3, Vector3]]:
    """
    Element-wise minimum and maximum over all three axes.

    Args:
        points: 3D points

    Returns:
        Tuple of (min_point, max_point), or None for an empty sequence
    """
    if len(points) == 0:
        return None

    coords = np.asarray(points, dtype=float).reshape(-1, 3)
    return (
        Vector3.from_iterable(coords.min(axis=0)),
        Vector3.from_iterable(coords.max(axis=0)),
    )


def polygon_validity(
    points: Sequence[Sequence[float]],
    plane: str = FLOOR_PLANE
) -> Optional[str]:
    """
    Check a projected polygon for self-intersections and similar defects.

    Degenerate polygons (fewer than 3 corners) are not reported here; the
    area fallback already covers them.

    Returns:
        None if the polygon is valid, else shapely's explanation
    """
    if len(points) < MIN_POLYGON_CORNERS:
        return None

    polygon = Polygon(_project(points, plane))
    if polygon.is_valid:
        return None

    reason = explain_validity(polygon)
    logger.debug(f"Invalid polygon in {plane} plane: {reason}")
    return reason
