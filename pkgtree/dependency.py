"""Build-time and runtime dependencies of a package."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pkgtree.condition import Condition, ConditionData
from pkgtree.names import PackageName, PackageVersionConstraint, parse_version_constraint

_PUNCT = r"!-/:-@\[-`{-~"
_DEPENDENCY_RE = re.compile(
    r"(?P<name>[A-Za-z][A-Za-z0-9.\-_]*) "
    r"(?P<version>[*=><]?[A-Za-z0-9][A-Za-z0-9" + _PUNCT + r"]*)"
)


def parse_dependency_string(text: str) -> tuple[PackageName, PackageVersionConstraint]:
    """Split a string like ``"vim =8.2"`` into name and version constraint."""
    match = _DEPENDENCY_RE.fullmatch(text)
    if match is None:
        raise ValueError(
            f"Could not parse into package name and package version constraint: {text!r}"
        )
    constraint = parse_version_constraint(match.group("version"))
    return PackageName(match.group("name")), constraint


@dataclass(frozen=True)
class Dependency:
    """A packaged dependency required at runtime, optionally guarded by a condition."""

    name: str
    condition: Condition | None = None

    @classmethod
    def from_value(cls, value: Any) -> Dependency:
        """Build a dependency from a string or a ``{name, condition}`` table."""
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, Mapping):
            name = value.get("name")
            condition = value.get("condition")
            if not isinstance(name, str):
                raise ValueError(f"A conditional dependency needs a string 'name', got {value!r}")
            if condition is None:
                raise ValueError(f"A conditional dependency needs a 'condition', got {value!r}")
            return cls(name, Condition.from_dict(condition))
        raise ValueError(f"A dependency must be a string or a table, got {value!r}")

    def to_value(self) -> str | dict[str, Any]:
        """Return the dependency in the form ``from_value`` accepts."""
        if self.condition is None:
            return self.name
        return {"name": self.name, "condition": self.condition.to_dict()}

    def str_equal(self, text: str) -> bool:
        """Return whether the dependency string equals ``text``."""
        return self.name == text

    def parse_as_name_and_version(self) -> tuple[PackageName, PackageVersionConstraint]:
        """Parse the dependency string into name and version constraint."""
        return parse_dependency_string(self.name)

    def check_condition(self, data: ConditionData) -> bool:
        """Return whether this dependency is relevant for ``data``."""
        if self.condition is None:
            return True
        return self.condition.matches(data)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class BuildDependency(Dependency):
    """A packaged dependency required only while building."""