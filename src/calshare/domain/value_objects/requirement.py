"""Permission requirement language.

A requirement arrives as a single permission, a sequence of permissions
(any of them suffices) or a mapping with ``anyOf``/``allOf`` lists. Every
shape is normalized into a frozen ``Requirement`` before evaluation; an
empty requirement never grants access.
"""

from collections.abc import Mapping
from dataclasses import dataclass

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _join(items: tuple) -> str:
    """Comma-join for display; None renders empty, anything else via str()."""
    return ", ".join("" if item is None else str(item) for item in items)


@dataclass(frozen=True)
class Requirement:
    """Canonical requirement: any of ``any_of`` and all of ``all_of``."""

    any_of: tuple[str, ...] = ()
    all_of: tuple[str, ...] = ()

    @property
    def is_unspecified(self) -> bool:
        return not self.any_of and not self.all_of

    def describe(self) -> str:
        parts = []
        if self.any_of:
            parts.append(f"anyOf: {_join(self.any_of)}")
        if self.all_of:
            parts.append(f"allOf: {_join(self.all_of)}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, list[str]]:
        return {"anyOf": list(self.any_of), "allOf": list(self.all_of)}


RequirementLike = Requirement | str | list | tuple | set | frozenset | Mapping | None


def _as_tuple(value: object) -> tuple:
    if isinstance(value, (list, tuple)):
        return tuple(value)
    if isinstance(value, (set, frozenset)):
        return tuple(sorted(value, key=str))
    return ()


def _field(mapping: Mapping, camel: str, snake: str) -> object:
    if camel in mapping:
        return mapping[camel]
    return mapping.get(snake)


def normalize_requirement(requirement: RequirementLike | object) -> Requirement:
    """Normalize any supported requirement shape. Never raises."""
    if isinstance(requirement, Requirement):
        return requirement
    if requirement is None:
        return Requirement()
    if isinstance(requirement, str):
        return Requirement(any_of=(requirement,))
    if isinstance(requirement, _SEQUENCE_TYPES):
        return Requirement(any_of=_as_tuple(requirement))
    if isinstance(requirement, Mapping):
        return Requirement(
            any_of=_as_tuple(_field(requirement, "anyOf", "any_of")),
            all_of=_as_tuple(_field(requirement, "allOf", "all_of")),
        )
    return Requirement()


def describe_requirement(requirement: RequirementLike | object) -> str:
    """Human-readable form for audit details, e.g. ``anyOf: A, B | allOf: C``."""
    return normalize_requirement(requirement).describe()
