"""Pattern matching and rewriting of intermediate trees."""

from hanslope.transform.patterns import (
    Binding,
    BindingKind,
    BranchPattern,
    LiteralPattern,
    Match,
    Pattern,
    SequencePattern,
    as_pattern,
    bind_any,
    bind_leaf,
    bind_sequence,
    match_pattern,
)
from hanslope.transform.rules import (
    Rule,
    RuleSet,
    Transform,
    ist_transformer,
    rewrite,
    rule,
)

__all__ = [
    "Binding",
    "BindingKind",
    "BranchPattern",
    "LiteralPattern",
    "Match",
    "Pattern",
    "Rule",
    "RuleSet",
    "SequencePattern",
    "Transform",
    "as_pattern",
    "bind_any",
    "bind_leaf",
    "bind_sequence",
    "ist_transformer",
    "match_pattern",
    "rewrite",
    "rule",
]
