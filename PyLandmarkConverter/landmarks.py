"""Data classes shared by the landmark readers and writers.

Readers build one :class:`LandmarkSet` per input document and writers only
read from it. Coordinates are kept as flat ``[x0, y0, z0, x1, y1, z1, ...]``
float arrays, matching the layout of the interchange formats; the
``*_points`` properties give ``(N, 3)`` views when row access is easier.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np


NUM_DIMS: int = 3

FIXED: str = "fixed"
MOVING: str = "moving"


def _as_vector(values, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64).reshape(-1)
    if arr.size != NUM_DIMS:
        raise ValueError(f"{name} must have {NUM_DIMS} components, got {arr.size}")
    arr.setflags(write=False)
    return arr


def _as_coordinates(values, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64).reshape(-1).copy()
    if arr.size % NUM_DIMS != 0:
        raise ValueError(
            f"{name} must hold whole (x, y, z) triples, got {arr.size} values"
        )
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class GeometryRecord:
    """Image geometry read from a header document.

    Attributes
    ----------
    image_dimensions : str
        The ``DimSize`` value, passed through verbatim (e.g. ``"512 512 120"``).
    offset : np.ndarray
        Physical position of voxel (0, 0, 0), shape (3,).
    spacing : np.ndarray
        Voxel spacing along x, y, z, shape (3,).
    orientation : str
        Raw orientation string. Read for completeness, not used in conversion.
    source : str or None
        Header path the record was read from, ``None`` for the zero fallback.
    """

    image_dimensions: str
    offset: np.ndarray
    spacing: np.ndarray
    orientation: str = ""
    source: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "offset", _as_vector(self.offset, "offset"))
        object.__setattr__(self, "spacing", _as_vector(self.spacing, "spacing"))

    @classmethod
    def zero(cls) -> GeometryRecord:
        """Geometry used when no header could be read."""
        return cls(image_dimensions="", offset=np.zeros(3), spacing=np.zeros(3))


@dataclass(frozen=True)
class LandmarkSet:
    """Landmark coordinates produced by a reader and consumed by writers.

    The set is immutable: coordinate arrays are copied and flagged read-only
    on construction.

    Attributes
    ----------
    fixed_coordinates : np.ndarray
        Flat physical coordinates of the fixed-image points, length ``3 * N``.
    moving_coordinates : np.ndarray
        Flat physical coordinates of the corresponding moving-image points.
        Empty when the source format has no paired data.
    image_dimensions : str
        Dimension string copied from the fixed image header (point-pair input).
    offset, spacing : np.ndarray or None
        Fixed image geometry (point-pair input only).
    source_path : str or None
        Document the landmarks were read from.
    """

    fixed_coordinates: np.ndarray
    moving_coordinates: np.ndarray = field(default_factory=lambda: np.zeros(0))
    image_dimensions: str = ""
    offset: Optional[np.ndarray] = None
    spacing: Optional[np.ndarray] = None
    source_path: Optional[str] = None
    dimension_count: int = NUM_DIMS

    def __post_init__(self) -> None:
        if self.dimension_count != NUM_DIMS:
            raise ValueError(
                f"Only {NUM_DIMS}D landmark sets are supported, got {self.dimension_count}"
            )
        fixed = _as_coordinates(self.fixed_coordinates, "fixed_coordinates")
        moving = _as_coordinates(self.moving_coordinates, "moving_coordinates")
        if moving.size and moving.size != fixed.size:
            raise ValueError(
                f"moving_coordinates ({moving.size}) and fixed_coordinates "
                f"({fixed.size}) must have the same length"
            )
        object.__setattr__(self, "fixed_coordinates", fixed)
        object.__setattr__(self, "moving_coordinates", moving)
        if self.offset is not None:
            object.__setattr__(self, "offset", _as_vector(self.offset, "offset"))
        if self.spacing is not None:
            object.__setattr__(self, "spacing", _as_vector(self.spacing, "spacing"))

    @classmethod
    def from_geometry(
        cls,
        fixed_coordinates,
        moving_coordinates,
        geometry: GeometryRecord,
        source_path: Optional[str] = None,
    ) -> LandmarkSet:
        """Build a paired set carrying the geometry it was converted with."""
        return cls(
            fixed_coordinates=fixed_coordinates,
            moving_coordinates=moving_coordinates,
            image_dimensions=geometry.image_dimensions,
            offset=geometry.offset,
            spacing=geometry.spacing,
            source_path=source_path,
        )

    @property
    def point_count(self) -> int:
        """Number of landmarks (pairs), not individual coordinates."""
        return self.fixed_coordinates.size // NUM_DIMS

    @property
    def has_moving(self) -> bool:
        return self.moving_coordinates.size > 0

    @property
    def has_geometry(self) -> bool:
        return self.offset is not None and self.spacing is not None

    @property
    def fixed_points(self) -> np.ndarray:
        return self.fixed_coordinates.reshape(-1, NUM_DIMS)

    @property
    def moving_points(self) -> np.ndarray:
        return self.moving_coordinates.reshape(-1, NUM_DIMS)

    def coordinates(self, which: str = FIXED) -> np.ndarray:
        """Return the flat coordinate array for ``"fixed"`` or ``"moving"``."""
        if which == FIXED:
            return self.fixed_coordinates
        if which == MOVING:
            return self.moving_coordinates
        raise ValueError(f"which must be '{FIXED}' or '{MOVING}', got {which!r}")

    def points(self, which: str = FIXED) -> np.ndarray:
        """Return the ``(N, 3)`` view of the requested coordinate set."""
        return self.coordinates(which).reshape(-1, NUM_DIMS)
