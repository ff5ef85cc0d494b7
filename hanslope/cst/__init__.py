"""Concrete syntax tree structures."""

from hanslope.cst.model import CstLeaf, CstMany, CstNode, CstSequence, CstTagged

__all__ = [
    "CstLeaf",
    "CstMany",
    "CstNode",
    "CstSequence",
    "CstTagged",
]
