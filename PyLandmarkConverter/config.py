from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import UnsupportedFormatError
from .processing.adapters.registry import check_compatibility


def _unwrap_singleton_list(value: Any) -> Any:
    """Unwrap legacy settings fields like [null] -> None, ["x"] -> "x"."""
    if isinstance(value, list) and len(value) == 1:
        return value[0]
    return value


def parse_keep_all(value: Any) -> bool:
    """Interpret the ``keep_all`` flag given as 0/1, a bool or a string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        if value in (0, 1):
            return bool(value)
    elif isinstance(value, str):
        text = value.strip().lower()
        if text in ("1", "true", "yes"):
            return True
        if text in ("0", "false", "no"):
            return False
    raise ValueError(f"keep_all must be 0 or 1, got {value!r}")


@dataclass
class ConverterConfig:
    in_file: Optional[str] = None
    in_type: Optional[str] = None
    out_dir: Optional[str] = None
    out_type: Optional[str] = None
    keep_all: Any = True
    strict: bool = False
    image_root: Optional[str] = None
    log_file: Optional[str] = None

    @classmethod
    def from_settings_file(cls, settings_file: str) -> "ConverterConfig":
        with open(settings_file, "r") as f:
            settings = json.load(f)
        return cls.from_settings_dict(settings)

    @classmethod
    def from_settings_dict(cls, settings: Dict[str, Any]) -> "ConverterConfig":
        def g(key: str, default: Any = None) -> Any:
            return _unwrap_singleton_list(settings.get(key, default))

        missing = [k for k in ("in_file", "in_type", "out_type") if k not in settings]
        if missing:
            raise KeyError(
                f"Settings file must contain in_file, in_type and out_type (missing: {', '.join(missing)})."
            )

        return cls(
            in_file=g("in_file"),
            in_type=g("in_type"),
            out_dir=g("out_dir"),
            out_type=g("out_type"),
            keep_all=g("keep_all", True),
            strict=bool(g("strict", False)),
            image_root=g("image_root"),
            log_file=g("log_file"),
        )

    def normalize(self, *, logger=None) -> "ConverterConfig":
        for name in ("in_file", "in_type", "out_dir", "out_type", "image_root"):
            value = getattr(self, name)
            if isinstance(value, str):
                value = value.strip()
                setattr(self, name, value or None)
        if self.in_type is not None:
            self.in_type = self.in_type.lower()
        if self.out_type is not None:
            self.out_type = self.out_type.lower()
        self.keep_all = parse_keep_all(self.keep_all)

        # Default to the working directory when none was given.
        if self.out_dir is None and self.in_file is not None:
            if logger is not None:
                logger.warning(
                    "No output directory was specified; output will be written to the current directory."
                )
            self.out_dir = "."
        return self

    def validate(self) -> None:
        if not self.in_file:
            raise ValueError("An input file (in_file) must be specified.")
        if not self.in_type:
            raise UnsupportedFormatError("An input type (in_type) must be specified.")
        if not self.out_type:
            raise UnsupportedFormatError("An output type (out_type) must be specified.")
        if not isinstance(self.keep_all, bool):
            raise ValueError("keep_all must be normalised to a bool before validation.")

        check_compatibility(self.in_type, self.out_type)
