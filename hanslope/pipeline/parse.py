"""High-level parse entrypoint: match, check, and wrap in a `ParseResult`."""

from __future__ import annotations

from collections.abc import Iterable
import logging

from hanslope.cst import CstNode
from hanslope.diagnostics import (
    PARSE_UNCONSUMED_INPUT,
    Diagnostic,
    diagnostic_at,
    diagnostic_from_failure,
)
from hanslope.matchers import Matcher, NotMatched
from hanslope.pipeline.options import ParseMode, ParseOptions
from hanslope.pipeline.result import ParseResult
from hanslope.transform import Rule

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParseOptions | None,
    mode: ParseMode | None,
) -> ParseOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParseOptions.for_mode(mode)

    return ParseOptions()


def parse(
    matcher: Matcher[CstNode],
    text: str,
    options: ParseOptions | None = None,
    *,
    mode: ParseMode | None = None,
    rules: Iterable[Rule] = (),
) -> ParseResult:
    resolved_options = _resolve_options(options=options, mode=mode)
    result = matcher(text)

    diagnostics: list[Diagnostic] = []
    if isinstance(result, NotMatched):
        diagnostic = diagnostic_from_failure(text, result, resolved_options.labels)
        logger.debug("parse failed: %s (label=%s)", diagnostic.format(), result.label)
        diagnostics.append(diagnostic)
    elif resolved_options.requires_full_input and result.rest.strip():
        leftover = result.rest.lstrip()
        diagnostic = diagnostic_at(text, leftover, PARSE_UNCONSUMED_INPUT)
        logger.debug("parse stopped early: %s", diagnostic.format())
        diagnostics.append(diagnostic)
    else:
        logger.debug("parsed %d characters", len(text) - len(result.rest))

    return ParseResult(
        source_text=text,
        result=result,
        options=resolved_options,
        diagnostics=diagnostics,
        rules=tuple(rules),
    )
