"""Rewrite rules and the single-pass bottom-up rewriter.

Rules are tried in order against each node once, after the node's children
have been rewritten. The first rule whose pattern matches replaces the node;
its output is never fed back through the rules. This is deliberately not a
rewrite-to-fixpoint system.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from hanslope.ist import IstBranch, IstSequence
from hanslope.transform.patterns import Pattern, as_pattern, match_pattern

type Transform = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class Rule:
    """Pattern plus the transform called with its captures as keywords."""

    pattern: Pattern
    transform: Transform

    def try_apply(self, value: object) -> tuple[bool, Any]:
        found = match_pattern(self.pattern, value)
        if found is None:
            return False, value
        return True, self.transform(**found.captures)

    def apply(self, value: object) -> Any:
        """Replace `value` if the pattern matches, otherwise return it as is."""
        return self.try_apply(value)[1]


type RuleSet = Sequence[Rule]


def rule(pattern: object, transform: Transform) -> Rule:
    return Rule(pattern=as_pattern(pattern), transform=transform)


def rewrite(rules: Iterable[Rule], node: object) -> Any:
    return _rewrite(tuple(rules), node)


def ist_transformer(*rules: Rule) -> Callable[[object], Any]:
    """Bundle `rules` into a reusable `node -> value` transformer."""
    rule_set = tuple(rules)

    def transform(node: object) -> Any:
        return _rewrite(rule_set, node)

    return transform


def _rewrite(rules: tuple[Rule, ...], node: object) -> Any:
    if isinstance(node, IstSequence):
        node = IstSequence(tuple(_rewrite(rules, element) for element in node.elements))
    elif isinstance(node, IstBranch):
        node = IstBranch({key: _rewrite(rules, value) for key, value in node.entries.items()})

    for candidate in rules:
        applied, result = candidate.try_apply(node)
        if applied:
            return result
    return node


__all__ = [
    "Rule",
    "RuleSet",
    "Transform",
    "ist_transformer",
    "rewrite",
    "rule",
]
