"""Adapter system for landmark input and output formats.

Each format is a small class registered under the name used on the command
line. Supporting a new format means subclassing :class:`LandmarkReader` or
:class:`LandmarkWriter` and registering it.

Example:
    from PyLandmarkConverter.processing.adapters import (
        LandmarkReaderRegistry,
        LandmarkWriterRegistry,
    )

    landmarks = LandmarkReaderRegistry.get("ireg").load("landmarks.txt")
    LandmarkWriterRegistry.get("std_txt").write(landmarks, "landmarks", "out")
"""

from .base import LandmarkReader, LandmarkWriter
from .readers import PointPairReader, RegistrationListReader
from .writers import PlainTextWriter, SlicerFiducialWriter, TransformixWriter
from .registry import (
    LandmarkReaderRegistry,
    LandmarkWriterRegistry,
    check_compatibility,
)

__all__ = [
    # Base
    "LandmarkReader",
    "LandmarkWriter",
    # Readers
    "PointPairReader",
    "RegistrationListReader",
    # Writers
    "TransformixWriter",
    "SlicerFiducialWriter",
    "PlainTextWriter",
    # Registry
    "LandmarkReaderRegistry",
    "LandmarkWriterRegistry",
    "check_compatibility",
]
