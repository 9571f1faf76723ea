"""PyLandmarkConverter: convert landmark coordinates between registration formats.

Readers:
- ix_pp: Image eXplorer point-pair exports (voxel pairs + fixed image header)
- ireg: Landmark lists written by the registration tool

Writers:
- tfx_lmk: Transformix SplineKernelTransform parameter file
- slr_fid: 3D Slicer fiducial files
- std_txt: Plain-text landmark lists
"""

from .PyLandmarkConverter import LandmarkConverter
from .config import ConverterConfig
from .errors import (
    GeometryReadError,
    LandmarkConverterError,
    LandmarkFileError,
    PointPairFormatError,
    RegistrationListFormatError,
    UnsupportedConversionError,
    UnsupportedFormatError,
)
from .io.file_operations import save_conversion_output
from .landmarks import GeometryRecord, LandmarkSet
from .logging_utils import configure_logging

__version__ = "1.0.0"

__all__ = [
    "LandmarkConverter",
    "ConverterConfig",
    "GeometryRecord",
    "LandmarkSet",
    "save_conversion_output",
    "configure_logging",
    # errors
    "LandmarkConverterError",
    "UnsupportedFormatError",
    "UnsupportedConversionError",
    "LandmarkFileError",
    "GeometryReadError",
    "RegistrationListFormatError",
    "PointPairFormatError",
]
