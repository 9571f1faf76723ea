"""Landmark readers for the supported input formats."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ...io.point_pairs import read_point_pairs
from ...io.registration_list import read_registration_list
from ...landmarks import LandmarkSet
from .base import LandmarkReader


class PointPairReader(LandmarkReader):
    """Image eXplorer point-pair export (voxel pairs + fixed image header)."""

    name: str = "ix_pp"
    description: str = "Point pair file of landmarks matched with Image eXplorer"
    provides_geometry: bool = True
    provides_moving: bool = True

    def load(
        self,
        path: Union[str, Path],
        *,
        keep_all: bool = True,
        strict: bool = False,
        image_root: Optional[Union[str, Path]] = None,
        output_type: Optional[str] = None,
    ) -> LandmarkSet:
        return read_point_pairs(
            path,
            output_type=output_type,
            keep_all=keep_all,
            strict=strict,
            image_root=image_root,
        )


class RegistrationListReader(LandmarkReader):
    """Flat landmark list written by the registration tool (physical space)."""

    name: str = "ireg"
    description: str = "Registration landmarks from the Caliper registration code"

    def load(
        self,
        path: Union[str, Path],
        *,
        keep_all: bool = True,
        strict: bool = False,
        image_root: Optional[Union[str, Path]] = None,
        output_type: Optional[str] = None,
    ) -> LandmarkSet:
        # The list carries no uncertainty flags or image paths.
        return read_registration_list(path, strict=strict)
