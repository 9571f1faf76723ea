"""3D Slicer fiducial (``.fcsv``) writer.

One file is written per coordinate set. Points are mapped to Slicer's
convention with ``x = -v[2], y = -v[1], z = v[0]``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..landmarks import FIXED, LandmarkSet
from ..processing.transformations import to_slicer_space
from .output_paths import format_number, output_file_path, write_text_output

SLICER_SUFFIXES = {
    "fixed": "_fixed_slicer.fcsv",
    "moving": "_moving_slicer.fcsv",
}

# Display settings of the fiducial list
FIDUCIAL_HEADER = (
    "# symbolScale = 5.5",
    "# symbolType = 11",
    "# visibility = 1",
    "# textScale = 12.5",
    "# color = 0.4,1,1",
    "# selectedColor = 0.807843,0.560784,1",
    "# opacity = 1",
    "# ambient = 0",
    "# diffuse = 1",
    "# specular = 0",
    "# power = 1",
    "# locked = 1",
    "# columns = label,x,y,z,sel,vis",
)


def format_fiducials(landmarks: LandmarkSet, which: str = FIXED, name: str = "lmk") -> str:
    """Build the text of a fiducial file for the ``which`` coordinate set.

    The last row has no line terminator.
    """
    header = [f"# name = {name}", f"# numPoints = {landmarks.point_count}", *FIDUCIAL_HEADER]
    rows = [
        f"{i}, {format_number(x)}, {format_number(y)}, {format_number(z)}, 0, 1"
        for i, (x, y, z) in enumerate(to_slicer_space(landmarks.coordinates(which)), start=1)
    ]
    return "\n".join(header) + "\n" + "\n".join(rows)


def write_slicer_fiducials(
    landmarks: LandmarkSet,
    stem: str,
    output_dir: Union[str, Path],
    which: str = FIXED,
    strict: bool = False,
) -> Optional[Path]:
    """Write ``<stem>_fixed_slicer.fcsv`` or ``<stem>_moving_slicer.fcsv``."""
    text = format_fiducials(landmarks, which)
    return write_text_output(
        output_file_path(output_dir, stem, SLICER_SUFFIXES[which]), text, strict=strict
    )
