"""Combinators composing matchers into grammars.

Every combinator builds its CST node only on success and honours the two
failure kinds: backtrack failures (no label) may be superseded, explicit
failures (labelled) are returned unchanged by everything except `label_fail`,
which only ever adds a label to a failure that has none.
"""

from __future__ import annotations

from collections.abc import Mapping

from hanslope.cst import CstLeaf, CstMany, CstNode, CstSequence, CstTagged
from hanslope.matchers.result import (
    Matched,
    Matcher,
    MatchResult,
    NotMatched,
    matched,
    not_matched,
)


def choice(*matchers: Matcher[CstNode]) -> Matcher[CstNode]:
    """Ordered choice.

    Returns the first success, or the first explicit failure. When every
    alternative backtracks, the failure that got furthest into the input
    (shortest rest) wins; on a tie the earliest alternative wins.
    """
    if len(matchers) < 2:
        raise ValueError("choice needs at least two matchers")

    def match_choice(input: str) -> MatchResult[CstNode]:
        failures: list[NotMatched] = []
        for matcher in matchers:
            result = matcher(input)
            if isinstance(result, Matched) or result.is_explicit:
                return result
            failures.append(result)
        # min() keeps the first of equally short rests.
        return min(failures, key=lambda failure: len(failure.rest))

    return match_choice


def seq(*matchers: Matcher[CstNode]) -> Matcher[CstNode]:
    """Match every matcher in order; the first failure is returned verbatim."""
    if len(matchers) < 2:
        raise ValueError("seq needs at least two matchers")

    def match_seq(input: str) -> MatchResult[CstNode]:
        children: list[CstNode] = []
        rest = input
        for matcher in matchers:
            result = matcher(rest)
            if isinstance(result, NotMatched):
                return result
            children.append(result.output)
            rest = result.rest
        return matched(CstSequence(tuple(children)), rest)

    return match_seq


def many(matcher: Matcher[CstNode]) -> Matcher[CstNode]:
    """Zero or more repetitions. Only an explicit failure makes this fail."""

    def match_many(input: str) -> MatchResult[CstNode]:
        children: list[CstNode] = []
        rest = input
        while True:
            result = matcher(rest)
            if isinstance(result, NotMatched):
                if result.is_explicit:
                    return result
                return matched(CstMany(tuple(children)), rest)
            if len(result.rest) >= len(rest):
                raise RuntimeError(
                    f"many() stopped making progress at offset {len(input) - len(rest)} of its input"
                )
            children.append(result.output)
            rest = result.rest

    return match_many


def many1(matcher: Matcher[CstNode]) -> Matcher[CstNode]:
    """One or more repetitions."""
    repeated = many(matcher)

    def match_many1(input: str) -> MatchResult[CstNode]:
        result = repeated(input)
        if isinstance(result, Matched):
            output = result.output
            if isinstance(output, CstMany) and not output.children:
                return not_matched(input)
        return result

    return match_many1


def maybe(matcher: Matcher[CstNode]) -> Matcher[CstNode]:
    """Optional match; backtracking yields a null leaf and consumes nothing."""

    def match_maybe(input: str) -> MatchResult[CstNode]:
        result = matcher(input)
        if isinstance(result, NotMatched) and not result.is_explicit:
            return matched(CstLeaf(None), input)
        return result

    return match_maybe


def not_(matcher: Matcher[CstNode]) -> Matcher[CstNode]:
    """Negative lookahead. Never consumes input and never exposes a match."""

    def match_not(input: str) -> MatchResult[CstNode]:
        result = matcher(input)
        if isinstance(result, Matched):
            return not_matched(input)
        if result.is_explicit:
            return result
        return matched(CstLeaf(None), input)

    return match_not


def tag(name: str, matcher: Matcher[CstNode]) -> Matcher[CstNode]:
    def match_tag(input: str) -> MatchResult[CstNode]:
        result = matcher(input)
        if isinstance(result, Matched):
            return matched(CstTagged(name, result.output), result.rest)
        return result

    return match_tag


def label_fail(matcher: Matcher[CstNode], label: str) -> Matcher[CstNode]:
    """Turn a backtrack failure of `matcher` into an explicit failure.

    The rest reported by the inner failure is kept, so a failing `seq` points
    at the element that failed rather than at the start of the sequence.
    """

    def match_label_fail(input: str) -> MatchResult[CstNode]:
        result = matcher(input)
        if isinstance(result, NotMatched) and not result.is_explicit:
            return not_matched(result.rest, label)
        return result

    return match_label_fail


def ref(table: Mapping[str, Matcher[CstNode]], name: str) -> Matcher[CstNode]:
    """Defer to `table[name]` at match time, for recursive rules."""

    def match_ref(input: str) -> MatchResult[CstNode]:
        return table[name](input)

    return match_ref


__all__ = [
    "choice",
    "label_fail",
    "many",
    "many1",
    "maybe",
    "not_",
    "ref",
    "seq",
    "tag",
]
