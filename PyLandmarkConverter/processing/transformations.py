import numpy as np


def as_triples(coordinates):
    """
    Views a flat coordinate sequence as rows of (x, y, z) triples.

    Args:
        coordinates (array_like): Flat [x0, y0, z0, x1, ...] coordinates.

    Returns:
        ndarray: (N, 3) array of triples.
    """
    coordinates = np.asarray(coordinates, dtype=np.float64).reshape(-1)
    if coordinates.size % 3 != 0:
        raise ValueError(
            f"Expected a multiple of 3 coordinates, got {coordinates.size}"
        )
    return coordinates.reshape(-1, 3)


def voxel_to_physical(voxels, spacing, offset):
    """
    Converts voxel coordinates to physical coordinates, axis by axis.

    physical[axis] = voxel[axis] * spacing[axis] + offset[axis]

    Args:
        voxels (array_like): Flat voxel coordinates or an (N, 3) array.
        spacing (array_like): Element spacing along x, y, z.
        offset (array_like): Physical position of voxel (0, 0, 0).

    Returns:
        ndarray: Physical coordinates with the same flat layout as the input.
    """
    triples = as_triples(voxels)
    spacing = np.asarray(spacing, dtype=np.float64).reshape(1, 3)
    offset = np.asarray(offset, dtype=np.float64).reshape(1, 3)
    return (triples * spacing + offset).reshape(-1)


def reverse_triples(coordinates):
    """
    Reverses the order of the points, keeping each (x, y, z) triple intact.

    Args:
        coordinates (array_like): Flat coordinates.

    Returns:
        ndarray: Flat coordinates with the last point first.
    """
    return as_triples(coordinates)[::-1].reshape(-1)


def to_zyx(coordinates):
    """
    Returns the points with their axes in reversed (z, y, x) order.

    Used by the Transformix and plain-text writers.
    """
    return as_triples(coordinates)[:, ::-1]


def to_slicer_space(coordinates):
    """
    Maps points to the fiducial layout: x = -v[2], y = -v[1], z = v[0].

    Args:
        coordinates (array_like): Flat coordinates.

    Returns:
        ndarray: (N, 3) array of fiducial positions.
    """
    zyx = to_zyx(coordinates).copy()
    zyx[:, 0:2] *= -1.0
    return zyx
