"""Structural patterns with named captures over intermediate-tree values."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from enum import StrEnum
from typing import Any

from hanslope.ist import IstBranch, IstLeaf, IstSequence, is_leaf, leaf_value


class BindingKind(StrEnum):
    """What a binding placeholder accepts."""

    ANY = "any"
    LEAF = "leaf"
    SEQUENCE = "sequence"


@dataclass(frozen=True, slots=True)
class Binding:
    kind: BindingKind
    name: str


@dataclass(frozen=True, slots=True)
class LiteralPattern:
    """Requires deep equality with the matched value."""

    value: Any


@dataclass(frozen=True, slots=True)
class SequencePattern:
    elements: tuple[Pattern, ...]


@dataclass(frozen=True, slots=True)
class BranchPattern:
    entries: Mapping[str, Pattern]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))


type Pattern = LiteralPattern | SequencePattern | BranchPattern | Binding


@dataclass(frozen=True, slots=True)
class Match:
    """Successful pattern match; `captures` keeps binding order."""

    captures: dict[str, Any]


def bind_any(name: str) -> Binding:
    return Binding(BindingKind.ANY, name)


def bind_leaf(name: str) -> Binding:
    return Binding(BindingKind.LEAF, name)


def bind_sequence(name: str) -> Binding:
    return Binding(BindingKind.SEQUENCE, name)


def as_pattern(value: object) -> Pattern:
    """Coerce pattern shorthand into a `Pattern`.

    `str`/`None` stand for leaves, `dict` for branches and `list`/`tuple` for
    sequences, nested freely with bindings. Intermediate nodes convert
    structurally; any other object is compared literally.
    """
    if isinstance(value, (Binding, LiteralPattern, SequencePattern, BranchPattern)):
        return value
    if value is None or isinstance(value, str):
        return LiteralPattern(IstLeaf(value))
    if isinstance(value, IstSequence):
        return SequencePattern(tuple(as_pattern(element) for element in value.elements))
    if isinstance(value, (list, tuple)):
        return SequencePattern(tuple(as_pattern(element) for element in value))
    if isinstance(value, IstBranch):
        return BranchPattern({key: as_pattern(entry) for key, entry in value.entries.items()})
    if isinstance(value, dict):
        return BranchPattern({key: as_pattern(entry) for key, entry in value.items()})
    return LiteralPattern(value)


def match_pattern(pattern: Pattern, value: object) -> Match | None:
    captures: dict[str, Any] = {}
    if _match_into(pattern, value, captures):
        return Match(captures=captures)
    return None


def _match_into(pattern: Pattern, value: object, captures: dict[str, Any]) -> bool:
    if isinstance(pattern, Binding):
        return _bind(pattern, value, captures)

    if isinstance(pattern, LiteralPattern):
        return pattern.value == value

    if isinstance(pattern, SequencePattern):
        if not isinstance(value, IstSequence):
            return False
        if len(pattern.elements) != len(value.elements):
            return False
        return all(
            _match_into(element, item, captures)
            for element, item in zip(pattern.elements, value.elements)
        )

    if isinstance(pattern, BranchPattern):
        if not isinstance(value, IstBranch):
            return False
        if pattern.entries.keys() != value.entries.keys():
            return False
        return all(
            _match_into(entry, value.entries[key], captures)
            for key, entry in pattern.entries.items()
        )

    raise TypeError(f"Unknown pattern: {pattern!r}")


def _bind(binding: Binding, value: object, captures: dict[str, Any]) -> bool:
    if binding.kind == BindingKind.ANY:
        captured = value
    elif binding.kind == BindingKind.LEAF:
        if not is_leaf(value):
            return False
        captured = leaf_value(value)
    else:
        if not isinstance(value, IstSequence):
            return False
        if not all(is_leaf(element) for element in value.elements):
            return False
        captured = tuple(leaf_value(element) for element in value.elements)

    # A name bound twice keeps the later capture.
    captures.pop(binding.name, None)
    captures[binding.name] = captured
    return True


__all__ = [
    "Binding",
    "BindingKind",
    "BranchPattern",
    "LiteralPattern",
    "Match",
    "Pattern",
    "SequencePattern",
    "as_pattern",
    "bind_any",
    "bind_leaf",
    "bind_sequence",
    "match_pattern",
]
