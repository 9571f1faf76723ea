"""Transformix landmark parameter file writer.

Writes a ``SplineKernelTransform`` parameter file that Transformix can apply
directly: the moving landmarks become the transform parameters and the
fixed landmarks the ``FixedImageLandmarks``. Both are written per point in
(z, y, x) order. Kernel and resampler settings are fixed defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from ..errors import UnsupportedConversionError
from ..landmarks import LandmarkSet
from ..processing.transformations import to_zyx
from .output_paths import (
    format_number,
    format_vector,
    output_file_path,
    write_text_output,
)

TRANSFORMIX_SUFFIX = "_transformix.txt"

IDENTITY_DIRECTION = (
    "1.0000000000 0.0000000000 0.0000000000 "
    "0.0000000000 1.0000000000 0.0000000000 "
    "0.0000000000 0.0000000000 1.0000000000"
)


def _landmark_list(coordinates) -> str:
    """Space-prefixed z y x values of every point, e.g. `` 3 2 1 6 5 4``."""
    return "".join(" " + format_number(v) for v in to_zyx(coordinates).reshape(-1))


def format_transformix(landmarks: LandmarkSet) -> str:
    """Build the text of a Transformix parameter file.

    Raises
    ------
    UnsupportedConversionError
        If the landmark set has no image geometry or no moving points.
    """
    if not landmarks.has_geometry:
        raise UnsupportedConversionError(
            "Transformix parameter files need image geometry; "
            "landmark lists without it cannot be converted."
        )
    if landmarks.point_count and not landmarks.has_moving:
        raise UnsupportedConversionError(
            "Transformix parameter files need paired (fixed and moving) landmarks."
        )

    lines: List[str] = [
        '(Transform "SplineKernelTransform")',
        f"(NumberOfParameters {landmarks.dimension_count * landmarks.point_count})",
        f"(TransformParameters{_landmark_list(landmarks.moving_coordinates)})",
        '(InitialTransformParametersFileName "NoInitialTransform")',
        '(HowToCombineTransforms "Compose")',
        "",
        "// Image specific",
        "(FixedImageDimension 3)",
        "(MovingImageDimension 3)",
        '(FixedInternalImagePixelType "float")',
        '(MovingInternalImagePixelType "float")',
        f"(Size {landmarks.image_dimensions})",
        "(Index 0 0 0)",
        f"(Spacing {format_vector(landmarks.spacing)})",
        f"(Origin {format_vector(landmarks.offset)})",
        f"(Direction {IDENTITY_DIRECTION})",
        '(UseDirectionCosines "true")',
        "",
        "// SplineKernelTransform specific",
        '(SplineKernelType "ThinPlateSpline")',
        "(SplinePoissonRatio 0.0)",
        "(SplineRelaxationFactor 0.0)",
        f"(FixedImageLandmarks{_landmark_list(landmarks.fixed_coordinates)})",
        "",
        "// ResampleInterpolator specific",
        '(ResampleInterpolator "FinalBSplineInterpolator")',
        "(FinalBSplineInterpolationOrder 3)",
        "",
        "// Resampler specific",
        '(Resampler "DefaultResampler")',
        "(DefaultPixelValue 0.000000)",
        '(ResultImageFormat "mhd")',
        '(ResultImagePixelType "short")',
        '(CompressResultImage "false")',
    ]
    return "\n".join(lines) + "\n"


def write_transformix(
    landmarks: LandmarkSet,
    stem: str,
    output_dir: Union[str, Path],
    strict: bool = False,
) -> Optional[Path]:
    """Write ``<stem>_transformix.txt`` into ``output_dir``.

    Returns the written path, or None if the file could not be created.
    """
    text = format_transformix(landmarks)
    return write_text_output(
        output_file_path(output_dir, stem, TRANSFORMIX_SUFFIX), text, strict=strict
    )
