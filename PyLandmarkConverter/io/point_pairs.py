"""Reader for Image eXplorer matching-points annotator exports.

A point-pair export is a whitespace separated stream of ``key=value``
tokens. The first two tokens name the fixed and moving images::

    Scan_1=C:\\data\\fixed.mhd
    Scan_2=C:\\data\\moving.mhd

and every landmark pair follows as a record of ``Point_<n>-><field>=<value>``
tokens::

    Point_01->Distinctiveness=0.82
    Point_01->ManuallyChosen=1
    Point_01->SqDiffRegion=5
    Point_01->VeryUnsure=0
    Point_01->0=120          fixed voxel, axis 0
    Point_01->0_Corresp=118  moving voxel, axis 0
    Point_01->0_SystemGuess=117   (optional, skipped)
    ... axes 1 and 2 ...

Coordinates are voxel indices of the fixed/moving image. They are converted
to physical coordinates with the fixed image's spacing and offset.
"""

from __future__ import annotations

import logging
import re
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Deque, Iterable, List, Optional, Tuple, Union

import numpy as np

from ..errors import LandmarkFileError, PointPairFormatError
from ..landmarks import NUM_DIMS, GeometryRecord, LandmarkSet
from ..processing.transformations import reverse_triples, voxel_to_physical
from .metaimage import locate_geometry_header, read_geometry

logger = logging.getLogger(__name__)

FIELD_DISTINCTIVENESS = "Distinctiveness"
FIELD_MANUALLY_CHOSEN = "ManuallyChosen"
FIELD_REGION = "SqDiffRegion"
FIELD_VERY_UNSURE = "VeryUnsure"
SUFFIX_CORRESP = "_Corresp"
SUFFIX_SYSTEM_GUESS = "_SystemGuess"

_POINT_TOKEN = re.compile(r"^Point_(?P<point>\d+)->(?P<field>[^=]+)=(?P<value>.*)$")
_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")


@dataclass(frozen=True)
class Token:
    """One whitespace separated token and the line it was read from."""

    text: str
    line_number: int


@dataclass(frozen=True)
class PointField:
    """A ``Point_<n>-><field>=<value>`` token split into its parts."""

    point: int
    field: str
    value: str


@dataclass(frozen=True)
class PointRecord:
    """Parse state of a single landmark pair.

    ``fixed_voxel`` and ``moving_voxel`` are ``None`` when the record was cut
    short by the end of the document.
    """

    point: Optional[int]
    manually_chosen: bool
    very_unsure: bool
    fixed_voxel: Optional[Tuple[float, float, float]]
    moving_voxel: Optional[Tuple[float, float, float]]
    system_guesses: int = 0
    discarded: bool = False

    @property
    def complete(self) -> bool:
        return self.fixed_voxel is not None and self.moving_voxel is not None


@dataclass
class PointPairDocument:
    """Everything read from a point-pair export before geometry conversion.

    ``points`` holds the kept records in reverse document order: each newly
    parsed point is pushed to the front.
    """

    fixed_image_path: str = ""
    moving_image_path: str = ""
    points: Deque[PointRecord] = field(default_factory=deque)
    discarded: List[PointRecord] = field(default_factory=list)
    issues: List[PointPairFormatError] = field(default_factory=list)

    @property
    def point_count(self) -> int:
        return len(self.points)

    def voxel_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Flat fixed and moving voxel coordinates, in accumulation order."""
        fixed = np.array([p.fixed_voxel for p in self.points], dtype=np.float64)
        moving = np.array([p.moving_voxel for p in self.points], dtype=np.float64)
        return fixed.reshape(-1), moving.reshape(-1)


def tokenize(text: str) -> List[Token]:
    """Split a document into tokens, remembering their 1-based line numbers."""
    return [
        Token(item, line_number)
        for line_number, line in enumerate(text.splitlines(), start=1)
        for item in line.split()
    ]


def parse_token(token: Union[Token, str]) -> Optional[PointField]:
    """Split a point token, or return None if it is not one."""
    text = token.text if isinstance(token, Token) else token
    match = _POINT_TOKEN.match(text)
    if match is None:
        return None
    return PointField(int(match.group("point")), match.group("field"), match.group("value"))


def normalize_image_path(raw: str, image_root: Optional[Union[str, Path]] = None) -> str:
    """Turn an image path written on another machine into a local path.

    Backslashes become forward slashes. When ``image_root`` is given, a
    path starting with a drive letter is re-rooted under it.
    """
    path = raw.replace("\\", "/")
    if image_root is not None and _DRIVE_PREFIX.match(path):
        relative = PurePosixPath(_DRIVE_PREFIX.sub("", path, count=1).lstrip("/"))
        return str(Path(image_root) / relative)
    return path


class _TokenStream:
    def __init__(self, tokens: List[Token]):
        self._tokens = tokens
        self._pos = 0

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    @property
    def position(self) -> int:
        return self._pos

    @property
    def last_line(self) -> int:
        if self._pos == 0:
            return 0
        return self._tokens[min(self._pos, len(self._tokens)) - 1].line_number

    def peek(self) -> Optional[Token]:
        if self.at_end:
            return None
        return self._tokens[self._pos]

    def next(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self._pos += 1
        return token


class PointPairParser:
    """Typed record parser over a tokenised point-pair export.

    Every token is checked against the field expected at its position. A
    mismatch is reported as a :class:`PointPairFormatError`; in the default
    mode it is logged and parsing continues with the token's value, in strict
    mode it is raised.
    """

    def __init__(self, keep_all: bool = True, strict: bool = False):
        self.keep_all = keep_all
        self.strict = strict

    def parse(self, text: str) -> PointPairDocument:
        document = PointPairDocument()
        stream = _TokenStream(tokenize(text))

        document.fixed_image_path = self._read_image_path(stream, document, "Scan_1")
        document.moving_image_path = self._read_image_path(stream, document, "Scan_2")

        while not stream.at_end:
            record, consumed = self.parse_record(stream, document)
            logger.debug(f"Point {record.point}: consumed {consumed} tokens")
            if not record.complete:
                break
            if record.discarded:
                document.discarded.append(record)
            else:
                document.points.appendleft(record)
        return document

    # -- reporting ---------------------------------------------------------

    def _report(self, document: PointPairDocument, kind: str, token: Optional[Token], line: int) -> None:
        error = PointPairFormatError(
            kind,
            token.line_number if token is not None else line,
            token.text if token is not None else None,
        )
        if self.strict:
            raise error
        logger.warning(str(error))
        document.issues.append(error)

    # -- header ------------------------------------------------------------

    def _read_image_path(self, stream: _TokenStream, document: PointPairDocument, kind: str) -> str:
        token = stream.next()
        if token is None:
            self._report(document, kind, None, stream.last_line)
            return ""
        if "=" not in token.text or not token.text.startswith("Scan_"):
            self._report(document, kind, token, token.line_number)
            return token.text
        return token.text.split("=", 1)[1]

    # -- records -----------------------------------------------------------

    def _expect(
        self,
        stream: _TokenStream,
        document: PointPairDocument,
        expected: str,
        point: Optional[int] = None,
    ) -> Optional[str]:
        """Consume one token and return its value.

        The field name must be ``expected`` and, when ``point`` is given, the
        point number must match the one the record started with.
        """
        token = stream.next()
        if token is None:
            self._report(document, expected, None, stream.last_line)
            return None
        parsed = parse_token(token)
        if parsed is None or parsed.field != expected:
            self._report(document, expected, token, token.line_number)
            # Best effort: keep whatever follows the last '='.
            return token.text.rsplit("=", 1)[-1]
        if point is not None and parsed.point != point:
            self._report(document, f"{expected} of point {point}", token, token.line_number)
        return parsed.value

    def _skip_system_guesses(self, stream: _TokenStream) -> int:
        skipped = 0
        while True:
            token = stream.peek()
            parsed = parse_token(token) if token is not None else None
            if parsed is None or not parsed.field.endswith(SUFFIX_SYSTEM_GUESS):
                return skipped
            stream.next()
            skipped += 1

    def _number(self, document: PointPairDocument, value: str, kind: str, line: int) -> float:
        try:
            return float(value)
        except ValueError:
            self._report(document, f"{kind} value", Token(value, line), line)
            return 0.0

    def _read_coordinates(
        self, stream: _TokenStream, document: PointPairDocument, point: Optional[int] = None
    ) -> Tuple[Optional[Tuple[float, ...]], Optional[Tuple[float, ...]], int]:
        fixed: List[float] = []
        moving: List[float] = []
        guesses = 0
        for axis in range(NUM_DIMS):
            for key, target in ((str(axis), fixed), (f"{axis}{SUFFIX_CORRESP}", moving)):
                guesses += self._skip_system_guesses(stream)
                value = self._expect(stream, document, key, point)
                if value is None:
                    return None, None, guesses
                target.append(self._number(document, value, key, stream.last_line))
        guesses += self._skip_system_guesses(stream)
        return tuple(fixed), tuple(moving), guesses

    def parse_record(self, stream: _TokenStream, document: PointPairDocument) -> Tuple[PointRecord, int]:
        """Parse one landmark record.

        Returns
        -------
        tuple
            The :class:`PointRecord` and the number of tokens it consumed.
        """
        start = stream.position

        first = stream.next()
        parsed = parse_token(first) if first is not None else None
        if parsed is None or parsed.field != FIELD_DISTINCTIVENESS:
            self._report(document, FIELD_DISTINCTIVENESS, first, stream.last_line)
        point = parsed.point if parsed is not None else None

        manual = self._expect(stream, document, FIELD_MANUALLY_CHOSEN, point)
        manually_chosen = manual is not None and manual.strip() != "0"
        self._expect(stream, document, FIELD_REGION, point)
        unsure = self._expect(stream, document, FIELD_VERY_UNSURE, point)

        # Automatically matched points are never flagged as unsure.
        very_unsure = manually_chosen and unsure is not None and unsure.strip() != "0"

        fixed, moving, guesses = self._read_coordinates(stream, document, point)
        record = PointRecord(
            point=point,
            manually_chosen=manually_chosen,
            very_unsure=very_unsure,
            fixed_voxel=fixed,
            moving_voxel=moving,
            system_guesses=guesses,
            discarded=very_unsure and not self.keep_all,
        )
        return record, stream.position - start


def parse_point_pairs(text: str, keep_all: bool = True, strict: bool = False) -> PointPairDocument:
    """Parse the text of a point-pair export without converting coordinates."""
    return PointPairParser(keep_all=keep_all, strict=strict).parse(text)


def convert_document(document: PointPairDocument, geometry: GeometryRecord, source_path: Optional[str] = None) -> LandmarkSet:
    """Convert parsed voxel pairs to a physical :class:`LandmarkSet`.

    The parser accumulates points in reverse document order; after the
    voxel -> physical conversion the triples are reversed to restore it.
    """
    fixed_voxels, moving_voxels = document.voxel_arrays()
    fixed = voxel_to_physical(fixed_voxels, geometry.spacing, geometry.offset)
    moving = voxel_to_physical(moving_voxels, geometry.spacing, geometry.offset)
    return LandmarkSet.from_geometry(
        reverse_triples(fixed),
        reverse_triples(moving),
        geometry,
        source_path=source_path,
    )


def read_point_pairs(
    path: Union[str, Path],
    output_type: Optional[str] = None,
    keep_all: bool = True,
    strict: bool = False,
    image_root: Optional[Union[str, Path]] = None,
) -> LandmarkSet:
    """Read a point-pair export and convert it to physical coordinates.

    Parameters
    ----------
    path : str or Path
        The point-pair export.
    output_type : str, optional
        Name of the output format the landmarks are destined for. Only
        logged; compatibility is checked by the caller.
    keep_all : bool, optional
        Keep manually chosen points flagged as very unsure (default True).
    strict : bool, optional
        Raise on unreadable files and format mismatches instead of warning.
    image_root : str or Path, optional
        Directory that replaces the drive letter of Windows image paths.

    Returns
    -------
    LandmarkSet
        Paired fixed/moving physical coordinates in document order, with the
        fixed image geometry attached.
    """
    logger.info(f"Opening point pairs file: {path}")
    try:
        with open(path, "r") as f:
            text = f.read()
    except OSError as e:
        if strict:
            raise LandmarkFileError(f"Failed to open point pairs file {path}: {e}") from e
        logger.warning(f"Failed to open point pairs file {path}!")
        return LandmarkSet.from_geometry([], [], GeometryRecord.zero(), source_path=str(path))
    logger.info("Successfully opened point pairs file.")
    if output_type is not None:
        logger.debug(f"Reading point pairs for output type '{output_type}'")

    document = parse_point_pairs(text, keep_all=keep_all, strict=strict)
    if document.discarded:
        logger.info(
            f"Discarded {len(document.discarded)} manually chosen point(s) marked as very unsure."
        )
    if document.issues:
        logger.warning(
            f"{len(document.issues)} formatting problem(s) found in {path}; output may be misaligned."
        )

    # Only the fixed image's header is read; both sets share its geometry.
    fixed_image = normalize_image_path(document.fixed_image_path, image_root)
    geometry = read_geometry(locate_geometry_header(fixed_image), strict=strict)

    landmarks = convert_document(document, geometry, source_path=str(path))
    logger.info(f"Read {landmarks.point_count} landmark pair(s) from {path}")
    return landmarks
