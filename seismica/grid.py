"""
Lattice geometry for the three visible faces of the box.

Each face is a fixed-topology 2D lattice of (x, y, z, w) coordinates stored
row-major, so lattice point (u, v) lives at float offset
(u * resolution + v) * 4 of the flat vertex buffer. The triangle and line
index buffers are derived from the lattice shape once and never change.
"""

from __future__ import annotations

import enum
import math
from typing import Sequence

import numpy as np

from seismica import defaults
from seismica.errors import InvalidParameter
from seismica.types import COORD_DTYPE, COORD_SIZE, X_INDEX, Y_INDEX, Z_INDEX

# Largest vertex index representable by an unsigned short element buffer
_UINT16_MAX_INDEX = np.iinfo(np.uint16).max


class FaceOrientation(enum.Enum):
    """Which side of the box a lattice covers."""

    TOP = "top"      # x-z plane, u along z, v along x
    LEFT = "left"    # y-z plane, u along z, v along y
    FRONT = "front"  # x-y plane, u along x, v along y


class GeometryPreset(enum.Enum):
    """How the configured origin relates to the box."""

    ANCHORED = "anchored"  # origin is the minimum corner
    CENTERED = "centered"  # origin is the centre of the box

    def min_corner(
        self,
        origin: Sequence[float],
        size: float,
        depth_factor: int = defaults.SIDE_DEPTH_FACTOR,
    ) -> tuple[float, float, float]:
        ox, oy, oz = (float(c) for c in origin)
        if self is GeometryPreset.CENTERED:
            return (ox - size / 2.0, oy - size / 2.0, oz - size * depth_factor / 2.0)
        return (ox, oy, oz)


def index_dtype(point_count: int) -> type:
    """Smallest element-buffer dtype that can address *point_count* vertices."""
    return np.uint16 if point_count - 1 <= _UINT16_MAX_INDEX else np.uint32


def quad_triangle_indices(rows: int, cols: int) -> np.ndarray:
    """Two triangles per lattice quad: topLeft, bottomLeft, bottomRight, bottomRight, topRight, topLeft."""
    u, v = np.meshgrid(np.arange(rows - 1), np.arange(cols - 1), indexing="ij")
    top_left = (u * cols + v).ravel()
    top_right = top_left + 1
    bottom_left = top_left + cols
    bottom_right = bottom_left + 1
    quads = np.stack(
        [top_left, bottom_left, bottom_right, bottom_right, top_right, top_left],
        axis=1,
    )
    return quads.ravel().astype(index_dtype(rows * cols))


def lattice_line_indices(rows: int, cols: int) -> np.ndarray:
    """Segment pairs for the axis-aligned lattice lines (no diagonals).

    Lines running along u come first (grouped by v), then lines running
    along v (grouped by u).
    """
    v, u = np.meshgrid(np.arange(cols), np.arange(rows - 1), indexing="ij")
    start = (u * cols + v).ravel()
    along_u = np.stack([start, start + cols], axis=1)

    u, v = np.meshgrid(np.arange(rows), np.arange(cols - 1), indexing="ij")
    start = (u * cols + v).ravel()
    along_v = np.stack([start, start + 1], axis=1)

    return np.concatenate([along_u, along_v]).ravel().astype(index_dtype(rows * cols))


def _axis(count: int, extent: float, origin: float) -> np.ndarray:
    return (np.arange(count, dtype=np.float64) * extent) / (count - 1) + origin


def _validate_geometry(size: float, resolution: int, depth_factor: int) -> None:
    if isinstance(resolution, bool) or not isinstance(resolution, (int, np.integer)) or resolution < 2:
        raise InvalidParameter(f"resolution must be an integer >= 2, got {resolution!r}")
    if isinstance(depth_factor, bool) or not isinstance(depth_factor, (int, np.integer)) or depth_factor < 1:
        raise InvalidParameter(f"depth_factor must be an integer >= 1, got {depth_factor!r}")
    if not (math.isfinite(size) and size > 0.0):
        raise InvalidParameter(f"size must be positive and finite, got {size!r}")


class GridFace:
    """
    One rendered face of the box.

    Attributes:
        orientation: Which side of the box this lattice covers
        resolution: Points along the short (v) axis
        rows: Points along the u axis
        base: Undeformed coordinates, shape (rows * resolution, 4), read-only
        positions: Per-tick output buffer with the same layout as base
        triangle_indices: Triangle list for filled drawing
        line_indices: Line list for the lattice outline
    """

    def __init__(
        self,
        orientation: FaceOrientation,
        base: np.ndarray,
        resolution: int,
    ):
        if isinstance(resolution, bool) or not isinstance(resolution, (int, np.integer)) or resolution < 2:
            raise InvalidParameter(f"resolution must be an integer >= 2, got {resolution!r}")
        # Own copy; the caller's array is never frozen
        base = np.array(base, dtype=COORD_DTYPE, copy=True, order="C")
        if base.ndim != 2 or base.shape[1] != COORD_SIZE or base.shape[0] % resolution:
            raise InvalidParameter(
                f"base must have shape (rows * {resolution}, {COORD_SIZE}), got {base.shape}"
            )

        self.orientation = orientation
        self.resolution = int(resolution)
        self.rows = base.shape[0] // self.resolution

        self._base = base
        self._base.flags.writeable = False
        self.positions = base.copy()

        self.triangle_indices = quad_triangle_indices(self.rows, self.resolution)
        self.line_indices = lattice_line_indices(self.rows, self.resolution)
        self.triangle_indices.flags.writeable = False
        self.line_indices.flags.writeable = False

    @classmethod
    def build(
        cls,
        orientation: FaceOrientation,
        origin: Sequence[float],
        size: float,
        resolution: int,
        depth_factor: int = defaults.SIDE_DEPTH_FACTOR,
    ) -> GridFace:
        """
        Generate the lattice for one face of a box whose minimum corner is *origin*.

        The box spans size along x and y and size * depth_factor along z.
        """
        _validate_geometry(size, resolution, depth_factor)
        ox, oy, oz = (float(c) for c in origin)
        long_count = resolution * depth_factor
        long_extent = size * depth_factor

        if orientation is FaceOrientation.TOP:
            rows = long_count
            u_axis = _axis(long_count, long_extent, oz)
            v_axis = _axis(resolution, size, ox)
            u, v = np.meshgrid(u_axis, v_axis, indexing="ij")
            x, y, z = v, np.full_like(u, oy + size), u
        elif orientation is FaceOrientation.LEFT:
            rows = long_count
            u_axis = _axis(long_count, long_extent, oz)
            v_axis = _axis(resolution, size, oy)
            u, v = np.meshgrid(u_axis, v_axis, indexing="ij")
            x, y, z = np.full_like(u, ox), v, u
        elif orientation is FaceOrientation.FRONT:
            rows = resolution
            u_axis = _axis(resolution, size, ox)
            v_axis = _axis(resolution, size, oy)
            u, v = np.meshgrid(u_axis, v_axis, indexing="ij")
            x, y, z = u, v, np.full_like(u, long_extent + oz)
        else:
            raise InvalidParameter(f"Unknown face orientation: {orientation!r}")

        base = np.zeros((rows * resolution, COORD_SIZE), dtype=COORD_DTYPE)
        base[:, X_INDEX] = x.ravel()
        base[:, Y_INDEX] = y.ravel()
        base[:, Z_INDEX] = z.ravel()
        return cls(orientation, base, resolution)

    @property
    def name(self) -> str:
        return self.orientation.value

    @property
    def base(self) -> np.ndarray:
        return self._base

    @property
    def shape(self) -> tuple[int, int]:
        """Lattice shape (rows, resolution)."""
        return (self.rows, self.resolution)

    @property
    def point_count(self) -> int:
        return self._base.shape[0]

    def offset(self, u: int, v: int) -> int:
        """Float offset of lattice point (u, v) in the flat vertex buffer."""
        if not (0 <= u < self.rows and 0 <= v < self.resolution):
            raise IndexError(f"Lattice position ({u}, {v}) outside {self.shape}")
        return (u * self.resolution + v) * COORD_SIZE

    def get_coord(self, u: int, v: int) -> np.ndarray:
        """Copy of the base coordinate at lattice point (u, v)."""
        return self._base[self.offset(u, v) // COORD_SIZE].copy()

    def vertex_data(self) -> np.ndarray:
        """Flat float32 view of the current positions, ready for buffer upload."""
        return self.positions.reshape(-1)

    def reset(self) -> None:
        """Put every vertex back on its base coordinate."""
        np.copyto(self.positions, self._base)

    def __repr__(self) -> str:
        return f"GridFace({self.name}, shape={self.shape})"


def build_box_faces(
    origin: Sequence[float] = defaults.GEOMETRY_ORIGIN,
    size: float = defaults.GEOMETRY_SIZE,
    resolution: int = defaults.GEOMETRY_RESOLUTION,
    preset: GeometryPreset = GeometryPreset.ANCHORED,
    depth_factor: int = defaults.SIDE_DEPTH_FACTOR,
) -> list[GridFace]:
    """Build the top, left and front faces of the box, in that order."""
    if len(origin) != 3:
        raise InvalidParameter(f"origin must have 3 components, got {origin!r}")
    _validate_geometry(size, resolution, depth_factor)
    corner = preset.min_corner(origin, size, depth_factor)
    return [
        GridFace.build(orientation, corner, size, resolution, depth_factor)
        for orientation in (FaceOrientation.TOP, FaceOrientation.LEFT, FaceOrientation.FRONT)
    ]
