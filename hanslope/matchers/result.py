"""Match outcomes and the matcher contract."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Matched[T]:
    output: T
    rest: str


@dataclass(frozen=True, slots=True)
class NotMatched:
    """Failure at `rest`.

    Without a label this is a backtrack failure that alternatives may silently
    supersede. With a label it is an explicit failure: every combinator passes
    it through untouched.
    """

    rest: str
    label: str | None = None

    @property
    def is_explicit(self) -> bool:
        return self.label is not None


type MatchResult[T] = Matched[T] | NotMatched
type Matcher[T] = Callable[[str], MatchResult[T]]


def matched[T](output: T, rest: str) -> Matched[T]:
    return Matched(output=output, rest=rest)


def not_matched(rest: str, label: str | None = None) -> NotMatched:
    return NotMatched(rest=rest, label=label)


__all__ = [
    "MatchResult",
    "Matched",
    "Matcher",
    "NotMatched",
    "matched",
    "not_matched",
]
