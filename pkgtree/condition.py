"""Conditions deciding whether a dependency takes part in a build."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

OneOrMore = str | tuple[str, ...]


@dataclass(frozen=True)
class ConditionData:
    """The facts a condition is checked against: build image and environment."""

    image_name: str | None = None
    env: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "env", tuple((str(k), str(v)) for k, v in self.env))


def _one_or_more(value: Any, key: str) -> OneOrMore | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, Sequence) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ValueError(f"'{key}' must be a string or a list of strings, got {value!r}")


def _env_pairs(value: Any) -> tuple[tuple[str, str], ...] | None:
    if value is None:
        return None
    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, Sequence) and not isinstance(value, str):
        items = value
    else:
        raise ValueError(f"'env_eq' must be a table of strings, got {value!r}")
    pairs = dict()
    for name, val in items:
        if not isinstance(name, str) or not isinstance(val, str):
            raise ValueError(f"'env_eq' must map strings to strings, got {name!r} = {val!r}")
        pairs[name] = val
    return tuple(sorted(pairs.items()))


@dataclass(frozen=True)
class Condition:
    """Requirements on environment and build image.

    ``has_env`` and ``in_image`` hold either one string or a tuple of strings;
    ``env_eq`` holds (name, value) pairs sorted by name.
    """

    has_env: OneOrMore | None = None
    env_eq: tuple[tuple[str, str], ...] | None = field(default=None)
    in_image: OneOrMore | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "has_env", _one_or_more(self.has_env, "has_env"))
        object.__setattr__(self, "env_eq", _env_pairs(self.env_eq))
        object.__setattr__(self, "in_image", _one_or_more(self.in_image, "in_image"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Condition:
        """Build a condition from a parsed table; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError(f"A condition must be a table, got {data!r}")
        return cls(
            has_env=data.get("has_env"),
            env_eq=data.get("env_eq"),
            in_image=data.get("in_image"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the condition as a table, leaving out unset fields."""
        result: dict[str, Any] = {}
        if self.has_env is not None:
            result["has_env"] = self.has_env if isinstance(self.has_env, str) else list(self.has_env)
        if self.env_eq is not None:
            result["env_eq"] = dict(self.env_eq)
        if self.in_image is not None:
            result["in_image"] = (
                self.in_image if isinstance(self.in_image, str) else list(self.in_image)
            )
        return result

    def matches(self, data: ConditionData) -> bool:
        """Return whether every set requirement holds for ``data``."""
        return (
            self._matches_has_env(data)
            and self._matches_env_eq(data)
            and self._matches_in_image(data)
        )

    def _matches_has_env(self, data: ConditionData) -> bool:
        if self.has_env is None:
            return True
        present = {name for name, _ in data.env}
        if isinstance(self.has_env, str):
            return self.has_env in present
        return all(required in present for required in self.has_env)

    def _matches_env_eq(self, data: ConditionData) -> bool:
        if self.env_eq is None:
            return True

        def first_value(name: str) -> str | None:
            return next((val for env_name, val in data.env if env_name == name), None)

        return all(first_value(name) == value for name, value in self.env_eq)

    def _matches_in_image(self, data: ConditionData) -> bool:
        if self.in_image is None:
            return True
        # Without a known image we are, by definition, not in the required one.
        if data.image_name is None:
            return False
        if isinstance(self.in_image, str):
            return data.image_name == self.in_image
        return data.image_name in self.in_image