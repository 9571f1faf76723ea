"""PyLandmarkConverter processing subpackage.

This package contains the coordinate handling and format plumbing:
- transformations: Voxel to physical conversion and axis reordering
- adapters: Reader and writer plug-ins with their registries
"""

from .transformations import (
    reverse_triples,
    to_slicer_space,
    to_zyx,
    voxel_to_physical,
)

__all__ = [
    "reverse_triples",
    "to_slicer_space",
    "to_zyx",
    "voxel_to_physical",
]
