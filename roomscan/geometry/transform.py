"""
Transform Module

Minimal linear algebra for scan poses: a 3-vector and a 4x4 pose matrix
with translation / rotation / scale decomposition.

Matrices use the column-vector convention: the translation lives in
column 3 (``matrix[:3, 3]``) and the basis vectors are columns 0-2.
"""

import math
from typing import Iterable, List, NamedTuple, Sequence

import numpy as np


class Vector3(NamedTuple):
    """An immutable point or direction in scan world space (meters)."""
    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    @property
    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @property
    def normalized(self) -> "Vector3":
        """Unit vector in the same direction (the zero vector stays zero)."""
        length = self.length
        if length == 0:
            return Vector3.zero()
        return Vector3(self.x / length, self.y / length, self.z / length)

    @property
    def formatted(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def distance_to(self, other: "Vector3") -> float:
        """Distance to another point."""
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def minimum(self, other: "Vector3") -> "Vector3":
        """Element-wise minimum."""
        return Vector3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def maximum(self, other: "Vector3") -> "Vector3":
        """Element-wise maximum."""
        return Vector3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def to_list(self) -> List[float]:
        return [self.x, self.y, self.z]


class Transform:
    """
    Immutable 4x4 pose transform (position, orientation and scale).

    The wrapped matrix is a read-only float64 numpy array.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix=None):
        if matrix is None:
            m = np.eye(4, dtype=float)
        else:
            m = np.array(matrix, dtype=float)
            if m.shape != (4, 4):
                raise ValueError(f"Transform matrix must be 4x4, got shape {m.shape}")
        m.flags.writeable = False
        self._matrix = m

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def from_translation(cls, xyz: Sequence[float]) -> "Transform":
        m = np.eye(4, dtype=float)
        m[:3, 3] = np.array(xyz, dtype=float)
        return cls(m)

    @classmethod
    def from_scale(cls, xyz: Sequence[float]) -> "Transform":
        m = np.eye(4, dtype=float)
        m[:3, :3] = np.diag(np.array(xyz, dtype=float))
        return cls(m)

    @classmethod
    def from_rotation_y(cls, radians: float) -> "Transform":
        """Rotation about the vertical (+Y) axis."""
        c = math.cos(radians)
        s = math.sin(radians)
        m = np.eye(4, dtype=float)
        m[0, 0] = c
        m[0, 2] = s
        m[2, 0] = -s
        m[2, 2] = c
        return cls(m)

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[float]]) -> "Transform":
        """
        Build a transform from four columns of four values each.

        Scan exports store poses column by column, with the last column
        holding the translation.
        """
        cols = np.array(columns, dtype=float)
        if cols.shape != (4, 4):
            raise ValueError(f"Expected 4 columns of 4 values, got shape {cols.shape}")
        return cls(cols.T)

    @classmethod
    def from_list(cls, values: Sequence[float]) -> "Transform":
        """Build a transform from 16 column-major values."""
        flat = np.array(values, dtype=float)
        if flat.shape != (16,):
            raise ValueError(f"Expected 16 values, got {flat.size}")
        return cls(flat.reshape(4, 4).T)

    # -------------------------------------------------------------------------
    # Decomposition
    # -------------------------------------------------------------------------

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    @property
    def position(self) -> Vector3:
        """Translation component."""
        return Vector3.from_iterable(self._matrix[:3, 3])

    @property
    def scale(self) -> Vector3:
        """Length of each basis column."""
        return Vector3.from_iterable(np.linalg.norm(self._matrix[:3, :3], axis=0))

    @property
    def rotation(self) -> np.ndarray:
        """3x3 rotation with scale divided out (zero-scale axes stay zero)."""
        basis = self._matrix[:3, :3]
        norms = np.linalg.norm(basis, axis=0)
        safe = np.where(norms == 0, 1.0, norms)
        return basis / safe

    @property
    def yaw_degrees(self) -> float:
        """Heading about +Y in degrees, in (-180, 180]."""
        r = self.rotation
        return math.degrees(math.atan2(r[0, 2], r[0, 0]))

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def compose(self, other: "Transform") -> "Transform":
        """Return ``self @ other`` (apply ``other`` first)."""
        return Transform(self._matrix @ other.matrix)

    def apply(self, point: Sequence[float]) -> Vector3:
        """Transform a point (w = 1)."""
        p = np.append(np.array(point, dtype=float), 1.0)
        return Vector3.from_iterable((self._matrix @ p)[:3])

    def to_list(self) -> List[float]:
        """16 column-major values, the inverse of ``from_list``."""
        return [float(v) for v in self._matrix.T.reshape(16)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.array_equal(self._matrix, other.matrix))

    def __hash__(self) -> int:
        # Same values as __eq__ compares (-0.0 and 0.0 hash alike)
        return hash(tuple(float(v) for v in self._matrix.reshape(16)))

    def is_close(self, other: "Transform", atol: float = 1e-9) -> bool:
        """Element-wise comparison with an absolute tolerance."""
        return bool(np.allclose(self._matrix, other.matrix, rtol=0.0, atol=atol))

    def __repr__(self) -> str:
        return f"Transform(position={self.position.formatted})"
