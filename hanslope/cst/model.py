"""Concrete syntax tree built by the matchers while parsing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CstLeaf:
    """Matched text, or `None` for zero-width matches (`maybe`, `not_`)."""

    text: str | None


@dataclass(frozen=True, slots=True)
class CstSequence:
    """Children matched one after another by `seq`; always two or more."""

    children: tuple[CstNode, ...]

    def __post_init__(self) -> None:
        if len(self.children) < 2:
            raise ValueError("CstSequence needs at least two children")


@dataclass(frozen=True, slots=True)
class CstMany:
    """Children matched repeatedly by `many`/`many1`; may be empty."""

    children: tuple[CstNode, ...]


@dataclass(frozen=True, slots=True)
class CstTagged:
    """A node kept around by the reducer under `tag`."""

    tag: str
    child: CstNode


type CstNode = CstLeaf | CstSequence | CstMany | CstTagged


__all__ = [
    "CstLeaf",
    "CstMany",
    "CstNode",
    "CstSequence",
    "CstTagged",
]
