"""Composable matchers, CST reduction and pattern-directed rewriting."""

from hanslope.cst import CstLeaf, CstMany, CstNode, CstSequence, CstTagged
from hanslope.ist import IstBranch, IstLeaf, IstNode, IstSequence, reduce_cst
from hanslope.matchers import (
    Matched,
    Matcher,
    MatchResult,
    NotMatched,
    any_char,
    choice,
    fail,
    label_fail,
    literal,
    many,
    many1,
    matched,
    maybe,
    not_,
    not_matched,
    ref,
    regex,
    seq,
    tag,
)
from hanslope.transform import (
    Rule,
    bind_any,
    bind_leaf,
    bind_sequence,
    ist_transformer,
    rewrite,
    rule,
)

__all__ = [
    "CstLeaf",
    "CstMany",
    "CstNode",
    "CstSequence",
    "CstTagged",
    "IstBranch",
    "IstLeaf",
    "IstNode",
    "IstSequence",
    "MatchResult",
    "Matched",
    "Matcher",
    "NotMatched",
    "Rule",
    "any_char",
    "bind_any",
    "bind_leaf",
    "bind_sequence",
    "choice",
    "fail",
    "ist_transformer",
    "label_fail",
    "literal",
    "many",
    "many1",
    "matched",
    "maybe",
    "not_",
    "not_matched",
    "reduce_cst",
    "ref",
    "regex",
    "rewrite",
    "rule",
    "seq",
    "tag",
]
