"""Primitive matchers over raw text."""

from __future__ import annotations

import re

from hanslope.cst import CstLeaf
from hanslope.matchers.result import Matcher, MatchResult, matched, not_matched


def any_char(input: str) -> MatchResult[CstLeaf]:
    """Consume exactly one character. Never trims whitespace."""
    if not input:
        return not_matched(input)
    return matched(CstLeaf(input[0]), input[1:])


def literal(s: str, *, trim: bool = True) -> Matcher[CstLeaf]:
    """Match the exact string `s`, after leading whitespace unless `trim` is off.

    A failure reports the untrimmed input as its rest.
    """

    def match_literal(input: str) -> MatchResult[CstLeaf]:
        trimmed = input.lstrip() if trim else input
        if trimmed.startswith(s):
            return matched(CstLeaf(s), trimmed[len(s) :])
        return not_matched(input)

    return match_literal


def regex(pattern: str | re.Pattern[str], *, trim: bool = True) -> Matcher[CstLeaf]:
    """Match `pattern` anchored at the start of the (trimmed) input."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def match_regex(input: str) -> MatchResult[CstLeaf]:
        trimmed = input.lstrip() if trim else input
        found = compiled.match(trimmed)
        if found is None:
            return not_matched(input)
        text = found.group(0)
        return matched(CstLeaf(text), trimmed[found.end() :])

    return match_regex


def fail(label: str) -> Matcher[CstLeaf]:
    """Always fail explicitly with `label`, consuming nothing."""

    def match_fail(input: str) -> MatchResult[CstLeaf]:
        return not_matched(input, label)

    return match_fail


__all__ = ["any_char", "fail", "literal", "regex"]
