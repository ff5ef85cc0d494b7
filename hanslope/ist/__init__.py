"""Intermediate syntax tree over the CST."""

from hanslope.ist.lower import reduce_cst
from hanslope.ist.model import (
    IstBranch,
    IstLeaf,
    IstNode,
    IstSequence,
    is_leaf,
    leaf_value,
)

__all__ = [
    "IstBranch",
    "IstLeaf",
    "IstNode",
    "IstSequence",
    "is_leaf",
    "leaf_value",
    "reduce_cst",
]
