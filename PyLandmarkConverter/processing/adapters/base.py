"""Base classes for landmark format adapters.

Readers turn one input document into a :class:`LandmarkSet`; writers turn a
:class:`LandmarkSet` into one output document per coordinate set. Readers
and writers never call each other: the converter picks one of each by name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from ...landmarks import FIXED, MOVING, LandmarkSet


class LandmarkReader(ABC):
    """Reads landmarks from one input format.

    Class attributes describe what the produced landmark sets carry, which
    is what writers are matched against.
    """

    name: str = "base"
    description: str = ""
    provides_geometry: bool = False
    provides_moving: bool = False

    @abstractmethod
    def load(
        self,
        path: Union[str, Path],
        *,
        keep_all: bool = True,
        strict: bool = False,
        image_root: Optional[Union[str, Path]] = None,
        output_type: Optional[str] = None,
    ) -> LandmarkSet:
        """Read the document at ``path``."""
        pass


class LandmarkWriter(ABC):
    """Writes landmarks to one output format."""

    name: str = "base"
    description: str = ""
    requires_geometry: bool = False
    # Whether a second file is written for the moving set
    writes_moving: bool = False

    @abstractmethod
    def write(
        self,
        landmarks: LandmarkSet,
        stem: str,
        output_dir: Union[str, Path],
        which: str = FIXED,
        strict: bool = False,
    ) -> Optional[Path]:
        """Write one output document and return its path."""
        pass

    @classmethod
    def accepts(cls, reader_class: type) -> bool:
        """Check whether landmarks from ``reader_class`` can be written."""
        return reader_class.provides_geometry or not cls.requires_geometry

    def coordinate_sets(self, reader_class: type) -> List[str]:
        """Coordinate sets to write: fixed always, moving for paired input."""
        if self.writes_moving and reader_class.provides_moving:
            return [FIXED, MOVING]
        return [FIXED]
