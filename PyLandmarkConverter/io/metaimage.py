"""Image geometry readers.

The fixed image of a point-pair export is only ever consulted for its
geometry: the dimension string, the offset (origin) and the element spacing.
Those are read from the textual header that accompanies the volume, either a
MetaImage ``.mhd`` header or, for NRRD volumes, the NRRD header via pynrrd.
No voxel data is loaded.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Union

import nrrd
import numpy as np

from ..errors import GeometryReadError
from ..landmarks import NUM_DIMS, GeometryRecord

logger = logging.getLogger(__name__)

METAIMAGE_EXTENSIONS = (".mhd", ".mha")
NRRD_EXTENSIONS = (".nrrd", ".nhdr")
HEADER_EXTENSIONS = METAIMAGE_EXTENSIONS + NRRD_EXTENSIONS

# MetaImage tags read from the header
TAG_DIM_SIZE = "DimSize"
TAG_OFFSET = "Offset"
TAG_SPACING = "ElementSpacing"
TAG_ORIENTATION = "Orientation"


def locate_geometry_header(image_path: Union[str, Path]) -> Path:
    """Return the header document that describes ``image_path``.

    Header paths are returned unchanged. Any other image file (a ``.raw``
    data file, for example) is expected to sit next to a MetaImage header
    with the same base name.
    """
    path = Path(image_path)
    if path.suffix.lower() in HEADER_EXTENSIONS:
        return path
    return path.with_suffix(".mhd")


def _parse_vector(text: str) -> np.ndarray:
    """Read up to three floats; missing or unreadable components stay 0."""
    values = np.zeros(NUM_DIMS)
    for i, item in enumerate(text.split()[:NUM_DIMS]):
        try:
            values[i] = float(item)
        except ValueError:
            break
    return values


def parse_metaimage_header(text: str) -> Dict[str, str]:
    """Split ``Key = value`` header lines into a dictionary.

    Lines without ``=`` are ignored; the last occurrence of a key wins.
    """
    tags: Dict[str, str] = {}
    for line in text.splitlines():
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        tags[key.strip()] = value.strip()
    return tags


def read_metaimage_geometry(path: Union[str, Path]) -> GeometryRecord:
    """Read geometry from a MetaImage header.

    Raises
    ------
    OSError
        If the header cannot be opened.
    """
    with open(path, "r") as f:
        tags = parse_metaimage_header(f.read())

    return GeometryRecord(
        image_dimensions=tags.get(TAG_DIM_SIZE, ""),
        offset=_parse_vector(tags.get(TAG_OFFSET, "")),
        spacing=_parse_vector(tags.get(TAG_SPACING, "")),
        orientation=tags.get(TAG_ORIENTATION, ""),
        source=str(path),
    )


def read_nrrd_geometry(path: Union[str, Path]) -> GeometryRecord:
    """Read geometry from an NRRD header using pynrrd.

    Spacing is taken from the norms of the ``space directions`` rows when
    present, otherwise from ``spacings``.
    """
    header = nrrd.read_header(str(path))

    sizes = header.get("sizes", [])
    image_dimensions = " ".join(str(int(s)) for s in sizes)

    offset = np.zeros(NUM_DIMS)
    origin = header.get("space origin")
    if origin is not None:
        origin = np.asarray(origin, dtype=np.float64).reshape(-1)[:NUM_DIMS]
        offset[: origin.size] = np.nan_to_num(origin)

    spacing = np.zeros(NUM_DIMS)
    orientation = ""
    directions = header.get("space directions")
    if directions is not None:
        rows = [
            np.asarray(row, dtype=np.float64)
            for row in directions
            if row is not None and not np.all(np.isnan(np.asarray(row, dtype=np.float64)))
        ][:NUM_DIMS]
        norms = np.array([np.linalg.norm(row) for row in rows])
        spacing[: norms.size] = norms
        unit_rows = [row / n if n else row for row, n in zip(rows, norms)]
        orientation = " ".join(f"{v:g}" for row in unit_rows for v in row)
    elif "spacings" in header:
        spacings = np.asarray(header["spacings"], dtype=np.float64)[:NUM_DIMS]
        spacing[: spacings.size] = np.nan_to_num(spacings)

    return GeometryRecord(
        image_dimensions=image_dimensions,
        offset=offset,
        spacing=spacing,
        orientation=orientation,
        source=str(path),
    )


def read_geometry(path: Union[str, Path], strict: bool = False) -> GeometryRecord:
    """Read the geometry of an image from its header document.

    Parameters
    ----------
    path : str or Path
        MetaImage (``.mhd``/``.mha``) or NRRD (``.nrrd``/``.nhdr``) header.
    strict : bool, optional
        Raise :class:`GeometryReadError` instead of falling back to a zero
        geometry when the header cannot be read.

    Returns
    -------
    GeometryRecord
        The parsed geometry, or :meth:`GeometryRecord.zero` on failure.
    """
    path = Path(path)
    logger.info(f"Opening MetaHeader file: {path}")
    try:
        if path.suffix.lower() in NRRD_EXTENSIONS:
            geometry = read_nrrd_geometry(path)
        else:
            geometry = read_metaimage_geometry(path)
    except (OSError, nrrd.NRRDError) as e:
        if strict:
            raise GeometryReadError(f"Failed to open fixed image file {path}: {e}") from e
        logger.warning(
            f"Failed to open fixed image file {path}; using zero offset and spacing."
        )
        return GeometryRecord.zero()

    logger.info("Successfully opened fixed image file.")
    logger.debug(
        f"Geometry: size=({geometry.image_dimensions}) "
        f"offset={geometry.offset.tolist()} spacing={geometry.spacing.tolist()}"
    )
    return geometry
