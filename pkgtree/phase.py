"""Build phases of a package: inline scripts or references to script files."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any


class PhaseKind(enum.Enum):
    """How a phase is given; the value is its key in a package file."""

    PATH = "path"
    TEXT = "script"


@dataclass(frozen=True)
class Phase:
    """One phase: a path to a script file or the script text itself."""

    kind: PhaseKind
    content: str | PurePath

    def __post_init__(self) -> None:
        if self.kind is PhaseKind.PATH:
            object.__setattr__(self, "content", PurePath(self.content))
        elif not isinstance(self.content, str):
            raise TypeError(f"Script phase content must be a string, got {self.content!r}")

    @classmethod
    def from_value(cls, value: Any) -> Phase:
        """Build a phase from a one-entry table ``{"path": ...}`` or ``{"script": ...}``."""
        if not isinstance(value, Mapping) or len(value) != 1:
            raise ValueError(f"A phase must be a table with exactly one entry, got {value!r}")
        ((key, content),) = value.items()
        try:
            kind = PhaseKind(key)
        except ValueError:
            raise ValueError(f"Unknown phase kind {key!r}, expected 'path' or 'script'") from None
        if not isinstance(content, str):
            raise ValueError(f"Phase {key!r} must be a string, got {content!r}")
        return cls(kind, content)

    def to_value(self) -> dict[str, str]:
        """Return the phase as a one-entry table."""
        return {self.kind.value: str(self.content)}