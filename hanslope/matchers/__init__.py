"""Matcher core (results + primitives + combinators)."""

from hanslope.matchers.combinators import (
    choice,
    label_fail,
    many,
    many1,
    maybe,
    not_,
    ref,
    seq,
    tag,
)
from hanslope.matchers.primitives import any_char, fail, literal, regex
from hanslope.matchers.result import (
    Matched,
    Matcher,
    MatchResult,
    NotMatched,
    matched,
    not_matched,
)

__all__ = [
    "MatchResult",
    "Matched",
    "Matcher",
    "NotMatched",
    "any_char",
    "choice",
    "fail",
    "label_fail",
    "literal",
    "many",
    "many1",
    "matched",
    "maybe",
    "not_",
    "not_matched",
    "ref",
    "regex",
    "seq",
    "tag",
]
