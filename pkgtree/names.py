"""Package names, package versions and version constraints."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9]*")
_VERSION_RE = re.compile(r"[0-9][-_.A-Za-z0-9]*")
_CONSTRAINT_RE = re.compile(r"(=)([0-9][-_.A-Za-z0-9]*)")


class PackageName(str):
    """The name of a package."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"PackageName({str.__repr__(self)})"


class PackageVersion(str):
    """The version string of a package."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"PackageVersion({str.__repr__(self)})"


@dataclass(frozen=True, order=True)
class PackageVersionConstraint:
    """A comparator together with the version it compares against."""

    constraint: str
    version: PackageVersion

    def matches(self, version: str) -> bool:
        """Return whether ``version`` satisfies this constraint."""
        return self.version == version

    def __str__(self) -> str:
        return f"{self.constraint}{self.version}"


def parse_package_name(text: str) -> PackageName:
    """Parse a package name: a letter followed by letters or digits.

    Parsing stops at the first character that cannot be part of a name.
    """
    match = _NAME_RE.match(text)
    if match is None:
        raise ValueError(f"Failed to parse package name: {text!r}")
    return PackageName(match.group(0))


def parse_package_version(text: str) -> PackageVersion:
    """Parse a version: a digit followed by digits, letters, '-', '_' or '.'.

    Parsing stops at the first character that cannot be part of a version.
    """
    match = _VERSION_RE.match(text)
    if match is None:
        raise ValueError(f"Failed to parse package version: {text!r}")
    return PackageVersion(match.group(0))


def parse_version_constraint(text: str) -> PackageVersionConstraint:
    """Parse a version constraint such as ``=0.1.0``."""
    match = _CONSTRAINT_RE.match(text)
    if match is None:
        raise ValueError(
            f"Failed to parse package version constraint: {text!r}. "
            "A package version constraint must have a comparator and a "
            "version string, like so: =0.1.0"
        )
    return PackageVersionConstraint(match.group(1), PackageVersion(match.group(2)))