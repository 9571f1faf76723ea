"""Reader for landmark lists written by the registration tool.

The list is a flat sequence of whitespace separated numbers, already in
physical coordinates. It may start with the number of points and always ends
with one artifact value (the writer repeats or appends a final token).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import numpy as np

from ..errors import LandmarkFileError, RegistrationListFormatError
from ..landmarks import NUM_DIMS, LandmarkSet
from ..processing.transformations import reverse_triples

logger = logging.getLogger(__name__)


def parse_registration_values(text: str, strict: bool = False) -> List[float]:
    """Read every token of the list as a float.

    The final token is exempt from checking because it is always discarded.
    Any other non-numeric token is read as 0 with a warning (strict mode
    raises :class:`RegistrationListFormatError`).
    """
    tokens = text.split()
    values = []
    for i, token in enumerate(tokens):
        try:
            values.append(float(token))
        except ValueError:
            if i != len(tokens) - 1:
                message = f"Non-numeric value {token!r} at position {i + 1} of landmark list"
                if strict:
                    raise RegistrationListFormatError(message)
                logger.warning(message + "; reading it as 0.")
            values.append(0.0)
    return values


def values_to_coordinates(values: List[float]) -> np.ndarray:
    """Strip the artifact and count header and return flat coordinates.

    The coordinates come back in document order; the triple reversal is
    applied by :func:`read_registration_list`.
    """
    values = list(values)
    if not values:
        return np.zeros(0)

    # The last value is always an artifact of the writer.
    values.pop()

    declared = None
    if len(values) % NUM_DIMS != 0:
        declared = values.pop(0)

    coordinates = np.asarray(values, dtype=np.float64)
    if coordinates.size % NUM_DIMS != 0:
        # Still not whole triples: drop the dangling values at the end.
        keep = coordinates.size - coordinates.size % NUM_DIMS
        logger.warning(
            f"Landmark list holds {coordinates.size} coordinates after removing the header; "
            f"ignoring the last {coordinates.size - keep}."
        )
        coordinates = coordinates[:keep]

    available = coordinates.size // NUM_DIMS
    if declared is not None and float(declared).is_integer():
        declared = int(declared)
        if 0 <= declared < available:
            logger.warning(
                f"Landmark list declares {declared} point(s) but holds {available}; "
                f"ignoring the extra {available - declared}."
            )
            coordinates = coordinates[: declared * NUM_DIMS]
        elif declared > available:
            logger.warning(
                f"Landmark list declares {declared} point(s) but only {available} were found."
            )
    return coordinates


def read_registration_list(path: Union[str, Path], strict: bool = False) -> LandmarkSet:
    """Read a registration landmark list.

    Parameters
    ----------
    path : str or Path
        The landmark list document.
    strict : bool, optional
        Raise on unreadable files and non-numeric tokens instead of warning.

    Returns
    -------
    LandmarkSet
        Fixed coordinates only; no moving set and no geometry.
    """
    logger.info(f"Opening landmarks file: {path}")
    try:
        with open(path, "r") as f:
            text = f.read()
    except OSError as e:
        if strict:
            raise LandmarkFileError(f"Failed to open landmarks file {path}: {e}") from e
        logger.warning(f"Failed to open landmarks file {path}!")
        return LandmarkSet(fixed_coordinates=np.zeros(0), source_path=str(path))
    logger.info("Successfully opened landmarks file.")

    coordinates = values_to_coordinates(parse_registration_values(text, strict=strict))
    landmarks = LandmarkSet(
        fixed_coordinates=reverse_triples(coordinates),
        source_path=str(path),
    )
    logger.info(f"Read {landmarks.point_count} landmark(s) from {path}")
    return landmarks
