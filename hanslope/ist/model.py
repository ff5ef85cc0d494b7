"""Intermediate syntax tree produced by reducing a CST."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class IstLeaf:
    text: str | None


@dataclass(frozen=True, slots=True)
class IstSequence:
    elements: tuple[Any, ...]

    def __len__(self) -> int:
        return len(self.elements)


@dataclass(frozen=True, slots=True)
class IstBranch:
    """Keyed node built from tagged CST nodes; key order carries no meaning.

    `entries` is a read-only copy of the mapping passed in.
    """

    entries: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __getitem__(self, key: str) -> Any:
        return self.entries[key]


type IstNode = IstLeaf | IstSequence | IstBranch


def is_leaf(value: object) -> bool:
    """Leaf-classified: anything that is neither a sequence nor a branch.

    Rewriting may place application objects inside the tree; those count as
    leaves alongside `IstLeaf`.
    """
    return not isinstance(value, (IstSequence, IstBranch))


def leaf_value(value: object) -> object:
    """Text of an `IstLeaf`, or the leaf-classified value itself."""
    if isinstance(value, IstLeaf):
        return value.text
    return value


__all__ = [
    "IstBranch",
    "IstLeaf",
    "IstNode",
    "IstSequence",
    "is_leaf",
    "leaf_value",
]
