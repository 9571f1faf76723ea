"""Registries of landmark readers and writers.

Formats are looked up by the names used on the command line (``ix_pp``,
``ireg``, ``tfx_lmk``, ``slr_fid``, ``std_txt``).
"""

from __future__ import annotations

from typing import Dict, List, Type

from ...errors import UnsupportedConversionError, UnsupportedFormatError
from .base import LandmarkReader, LandmarkWriter
from .readers import PointPairReader, RegistrationListReader
from .writers import PlainTextWriter, SlicerFiducialWriter, TransformixWriter


class LandmarkReaderRegistry:
    """Registry for input formats.

    Example:
        >>> reader = LandmarkReaderRegistry.get("ix_pp")
        >>> landmarks = reader.load("pairs.txt", keep_all=False)
    """

    _readers: Dict[str, Type[LandmarkReader]] = {}

    @classmethod
    def register(cls, reader_class: Type[LandmarkReader]) -> None:
        cls._readers[reader_class.name] = reader_class

    @classmethod
    def get_class(cls, name: str) -> Type[LandmarkReader]:
        if name not in cls._readers:
            available = ", ".join(cls._readers.keys())
            raise UnsupportedFormatError(
                f"Unexpected input format '{name}'. Options are: {available}"
            )
        return cls._readers[name]

    @classmethod
    def get(cls, name: str) -> LandmarkReader:
        return cls.get_class(name)()

    @classmethod
    def list_available(cls) -> List[str]:
        return list(cls._readers.keys())


class LandmarkWriterRegistry:
    """Registry for output formats."""

    _writers: Dict[str, Type[LandmarkWriter]] = {}

    @classmethod
    def register(cls, writer_class: Type[LandmarkWriter]) -> None:
        cls._writers[writer_class.name] = writer_class

    @classmethod
    def get_class(cls, name: str) -> Type[LandmarkWriter]:
        if name not in cls._writers:
            available = ", ".join(cls._writers.keys())
            raise UnsupportedFormatError(
                f"Unexpected output format '{name}'. Options are: {available}"
            )
        return cls._writers[name]

    @classmethod
    def get(cls, name: str) -> LandmarkWriter:
        return cls.get_class(name)()

    @classmethod
    def list_available(cls) -> List[str]:
        return list(cls._writers.keys())


def check_compatibility(input_type: str, output_type: str) -> None:
    """Fail early when ``input_type`` cannot be converted to ``output_type``.

    Raises
    ------
    UnsupportedFormatError
        If either name is not registered.
    UnsupportedConversionError
        If the writer needs data the reader does not provide (for example a
        landmark list has no geometry for a Transformix parameter file).
    """
    reader_class = LandmarkReaderRegistry.get_class(input_type)
    writer_class = LandmarkWriterRegistry.get_class(output_type)
    if not writer_class.accepts(reader_class):
        raise UnsupportedConversionError(
            f"Conversion from '{input_type}' to '{output_type}' is not supported: "
            f"{writer_class.description or output_type} needs image geometry, "
            f"which {reader_class.description or input_type} does not provide."
        )


# Register built-in formats
LandmarkReaderRegistry.register(PointPairReader)
LandmarkReaderRegistry.register(RegistrationListReader)

LandmarkWriterRegistry.register(TransformixWriter)
LandmarkWriterRegistry.register(SlicerFiducialWriter)
LandmarkWriterRegistry.register(PlainTextWriter)
