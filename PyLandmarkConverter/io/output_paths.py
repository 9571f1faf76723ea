"""Output naming and text helpers shared by the landmark writers."""

from __future__ import annotations

import logging
from pathlib import Path, PureWindowsPath
from typing import Optional, Union

from ..errors import LandmarkFileError

logger = logging.getLogger(__name__)


def output_stem(input_path: Union[str, Path]) -> str:
    """Base name of the input file without its directory and extension.

    Both ``/`` and ``\\`` are treated as separators so that Windows paths
    given on another platform still yield the bare file name.
    """
    return PureWindowsPath(str(input_path)).stem


def output_file_path(output_dir: Union[str, Path], stem: str, suffix: str) -> Path:
    return Path(output_dir) / f"{stem}{suffix}"


def format_number(value: float) -> str:
    """Format a coordinate the way C++ streams do by default (``%g``)."""
    return f"{float(value):g}"


def format_vector(values) -> str:
    return " ".join(format_number(v) for v in values)


def write_text_output(path: Path, text: str, strict: bool = False) -> Optional[Path]:
    """Write ``text`` to ``path``.

    Returns the path, or None if the file could not be created and
    ``strict`` is False.
    """
    logger.info(f"Creating output file: {path}")
    try:
        with open(path, "w", newline="\n") as f:
            f.write(text)
    except OSError as e:
        if strict:
            raise LandmarkFileError(f"Failed to create output file {path}: {e}") from e
        logger.warning(f"Failed to create output file {path}!")
        return None
    return path
