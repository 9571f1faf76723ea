"""Landmark writers for the supported output formats."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ...io.slicer_writer import write_slicer_fiducials
from ...io.text_writer import write_plain_text
from ...io.transformix_writer import write_transformix
from ...landmarks import FIXED, LandmarkSet
from .base import LandmarkWriter


class TransformixWriter(LandmarkWriter):
    """Transformix ``SplineKernelTransform`` parameter file (both sets in one file)."""

    name: str = "tfx_lmk"
    description: str = "Transformix landmark-based transform input file"
    requires_geometry: bool = True

    def write(
        self,
        landmarks: LandmarkSet,
        stem: str,
        output_dir: Union[str, Path],
        which: str = FIXED,
        strict: bool = False,
    ) -> Optional[Path]:
        return write_transformix(landmarks, stem, output_dir, strict=strict)


class SlicerFiducialWriter(LandmarkWriter):
    name: str = "slr_fid"
    description: str = "3D Slicer fiducial file"
    writes_moving: bool = True

    def write(
        self,
        landmarks: LandmarkSet,
        stem: str,
        output_dir: Union[str, Path],
        which: str = FIXED,
        strict: bool = False,
    ) -> Optional[Path]:
        return write_slicer_fiducials(landmarks, stem, output_dir, which=which, strict=strict)


class PlainTextWriter(LandmarkWriter):
    name: str = "std_txt"
    description: str = "Standard plain text file"
    writes_moving: bool = True

    def write(
        self,
        landmarks: LandmarkSet,
        stem: str,
        output_dir: Union[str, Path],
        which: str = FIXED,
        strict: bool = False,
    ) -> Optional[Path]:
        return write_plain_text(landmarks, stem, output_dir, which=which, strict=strict)
