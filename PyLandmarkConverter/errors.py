"""Exception types raised by PyLandmarkConverter.

Most failures are tolerated by default (logged as warnings while the
conversion carries on with whatever was read). These exceptions are raised
for usage problems, and for I/O and format problems when ``strict`` mode is
enabled.
"""

from __future__ import annotations

from typing import Optional


class LandmarkConverterError(Exception):
    """Base class for all PyLandmarkConverter errors."""


class UnsupportedFormatError(LandmarkConverterError, ValueError):
    """An input or output type name is not recognised."""


class UnsupportedConversionError(LandmarkConverterError, ValueError):
    """The requested input/output pairing cannot be converted."""


class LandmarkFileError(LandmarkConverterError, OSError):
    """A landmark document could not be opened for reading or writing."""


class GeometryReadError(LandmarkFileError):
    """An image header document could not be opened or parsed."""


class RegistrationListFormatError(LandmarkConverterError, ValueError):
    """A registration landmark list holds a token that is not a number."""


class PointPairFormatError(LandmarkConverterError):
    """A token in a point-pair export did not have the expected key.

    Attributes
    ----------
    kind : str
        Name of the field that was expected (e.g. ``"ManuallyChosen"``).
    line_number : int
        1-based line of the offending token, 0 when unknown.
    token : str or None
        The token text that was found instead.
    """

    def __init__(self, kind: str, line_number: int, token: Optional[str] = None):
        self.kind = kind
        self.line_number = line_number
        self.token = token
        message = f"Error reading point pair file value: {kind} at line {line_number}"
        if token is not None:
            message += f" (found {token!r})"
        super().__init__(message)
