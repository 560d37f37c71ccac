"""In-memory view of the ``pkg.toml`` files below a repository root."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Union

PKG_TOML_NAME = "pkg.toml"


@dataclass(frozen=True)
class PathComponent:
    """One part of a path: either a directory name or the ``pkg.toml`` file.

    ``dir_name`` is ``None`` for the ``pkg.toml`` file.
    """

    dir_name: str | None = None

    def is_pkg_toml(self) -> bool:
        """Return whether this component names a ``pkg.toml`` file."""
        return self.dir_name is None

    def __str__(self) -> str:
        return PKG_TOML_NAME if self.dir_name is None else self.dir_name


PKG_TOML = PathComponent()

# A tree element is either the content of a pkg.toml file or a directory map.
Element = Union[str, "dict[PathComponent, Element]"]


def path_component(part: str) -> PathComponent:
    """Turn one part of a relative path into a :class:`PathComponent`."""
    if part in ("", ".", ".."):
        raise ValueError(f"Unexpected path component: {part!r}")
    if "/" in part or os.sep in part or (os.altsep and os.altsep in part):
        raise ValueError(f"Unexpected path component (root or prefix): {part!r}")
    if part == PKG_TOML_NAME:
        return PKG_TOML
    return PathComponent(part)


def _components(path: str | PurePath) -> Iterator[PathComponent]:
    for part in PurePath(path).parts:
        yield path_component(part)


def _toml_files_in_tree(tree: dict[PathComponent, Element]) -> bool:
    if isinstance(tree.get(PKG_TOML), str):
        return True
    return any(
        isinstance(value, str) or _toml_files_in_tree(value) for value in tree.values()
    )


def _walk(directory: Path, device: int) -> Iterator[Path]:
    with os.scandir(directory) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        if entry.name.startswith("."):
            continue
        if entry.is_dir(follow_symlinks=False):
            if entry.stat(follow_symlinks=False).st_dev != device:
                continue
            yield from _walk(Path(entry.path), device)
        elif entry.name == PKG_TOML_NAME:
            yield Path(entry.path)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as err:
        raise OSError(f"Reading file from filesystem: {path}") from err


@dataclass
class FileSystemRepresentation:
    """All ``pkg.toml`` files below ``root``, loaded into a tree.

    ``files`` holds the paths of the loaded files relative to ``root``.
    """

    root: Path
    files: list[PurePath] = field(default_factory=list)
    elements: dict[PathComponent, Element] = field(default_factory=dict)

    @classmethod
    def load(cls, root: str | os.PathLike[str]) -> FileSystemRepresentation:
        """Read every non-hidden ``pkg.toml`` below ``root`` on the same file system."""
        root_path = Path(root)
        fsr = cls(root_path)
        device = root_path.stat().st_dev
        for full_path in _walk(root_path, device):
            relative = PurePath(full_path.relative_to(root_path))
            fsr.files.append(relative)
            current = fsr.elements
            for component in _components(relative):
                if component.is_pkg_toml():
                    if component not in current:
                        current[component] = _read(full_path)
                else:
                    subtree = current.setdefault(component, {})
                    if isinstance(subtree, str):
                        raise ValueError(f"Path component {component} is a file: {relative}")
                    current = subtree
        return fsr

    def is_leaf_file(self, path: str | PurePath) -> bool:
        """Return whether ``path`` is a ``pkg.toml`` with no more packages below it."""
        current = self.elements
        for component in _components(path):
            element = current.get(component)
            if element is None:
                raise LookupError(
                    f"Path component '{component}' was not loaded in map, "
                    "this is most likely a bug"
                )
            if isinstance(element, str):
                return len(current) == 1 or not _toml_files_in_tree(current)
            current = element
        return False

    def get_files_for(self, path: str | PurePath) -> list[tuple[PurePath, str]]:
        """Return the trail of ``(path, content)`` of ``pkg.toml`` files from the root to ``path``."""
        result: list[tuple[PurePath, str]] = []
        current = self.elements
        current_path = PurePath()
        for component in _components(path):
            if not component.is_pkg_toml():
                intermediate = current.get(PKG_TOML)
                if isinstance(intermediate, str):
                    result.append((current_path / PKG_TOML_NAME, intermediate))

            element = current.get(component)
            if element is None:
                raise LookupError(
                    f"Path component '{component}' was not loaded in map, "
                    "this is most likely a bug"
                )
            if isinstance(element, str):
                result.append((current_path / PKG_TOML_NAME, element))
            else:
                current_path = current_path / str(component.dir_name)
                current = element
        return result