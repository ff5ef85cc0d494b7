"""Reduce a concrete syntax tree into the dense intermediate tree."""

from __future__ import annotations

from hanslope.cst import CstLeaf, CstMany, CstNode, CstSequence, CstTagged
from hanslope.ist.model import IstBranch, IstLeaf, IstNode, IstSequence


def reduce_cst(node: CstNode) -> IstNode:
    """Keep tagged structure, throw away the rest.

    Without tags the whole tree collapses to one string leaf. Tagged nodes
    become single-entry branches, which a sequence merges into one branch and
    a repetition (or a sequence holding nested sequences) flattens into a list.
    """
    if isinstance(node, CstLeaf):
        return IstLeaf(node.text)

    if isinstance(node, CstTagged):
        return IstBranch({node.tag: reduce_cst(node.child)})

    if isinstance(node, (CstSequence, CstMany)):
        children = [reduce_cst(child) for child in node.children]
        return _reduce_children(children, merge_branches=isinstance(node, CstSequence))

    raise TypeError(f"Unknown CST node: {node!r}")


def _reduce_children(children: list[IstNode], *, merge_branches: bool) -> IstNode:
    has_branches = any(isinstance(child, IstBranch) for child in children)
    has_sequences = any(isinstance(child, IstSequence) for child in children)

    if merge_branches and has_branches and not has_sequences:
        entries: dict[str, IstNode] = {}
        for child in children:
            if isinstance(child, IstBranch):
                entries.update(child.entries)
        return IstBranch(entries)

    if has_branches or has_sequences:
        elements: list[IstNode] = []
        for child in children:
            if isinstance(child, IstSequence):
                elements.extend(child.elements)
            elif isinstance(child, IstBranch):
                elements.append(child)
        return IstSequence(tuple(elements))

    parts: list[str] = []
    for child in children:
        if isinstance(child, IstLeaf) and child.text is not None:
            parts.append(child.text)
    return IstLeaf("".join(parts))


__all__ = ["reduce_cst"]
