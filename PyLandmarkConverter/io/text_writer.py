"""Plain-text landmark writer (``point`` / count / one point per line)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..landmarks import FIXED, LandmarkSet
from ..processing.transformations import to_zyx
from .output_paths import format_vector, output_file_path, write_text_output

TEXT_SUFFIXES = {
    "fixed": "_fixed_landmarks.txt",
    "moving": "_moving_landmarks.txt",
}


def format_plain_text(landmarks: LandmarkSet, which: str = FIXED) -> str:
    lines = ["point", str(landmarks.point_count)]
    lines.extend(format_vector(p) for p in to_zyx(landmarks.coordinates(which)))
    return "\n".join(lines) + "\n"


def write_plain_text(
    landmarks: LandmarkSet,
    stem: str,
    output_dir: Union[str, Path],
    which: str = FIXED,
    strict: bool = False,
) -> Optional[Path]:
    """Write ``<stem>_fixed_landmarks.txt`` or ``<stem>_moving_landmarks.txt``."""
    text = format_plain_text(landmarks, which)
    return write_text_output(
        output_file_path(output_dir, stem, TEXT_SUFFIXES[which]), text, strict=strict
    )
