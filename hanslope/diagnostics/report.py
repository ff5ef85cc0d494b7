"""Build diagnostics from match failures."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from hanslope.diagnostics.codes import PARSE_SYNTAX_INVALID, DiagnosticSpec
from hanslope.diagnostics.diagnostic import Diagnostic
from hanslope.matchers import NotMatched
from hanslope.text import TextRange, line_column, offset_of_rest


def diagnostic_at(source: str, rest: str, spec: DiagnosticSpec, *, label: str | None = None) -> Diagnostic:
    offset = offset_of_rest(source, rest)
    return Diagnostic(
        code=spec.code,
        message=spec.message,
        range=TextRange.empty(offset),
        position=line_column(source, offset),
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
        label=label,
    )


def diagnostic_from_failure(
    source: str,
    failure: NotMatched,
    specs: Mapping[str, DiagnosticSpec] | None = None,
) -> Diagnostic:
    """Describe `failure` using the spec registered for its label.

    Backtrack failures and labels without a registered spec fall back to
    `PARSE_SYNTAX_INVALID`.
    """
    spec = PARSE_SYNTAX_INVALID
    if failure.label is not None and specs is not None:
        spec = specs.get(failure.label, PARSE_SYNTAX_INVALID)
    return diagnostic_at(source, failure.rest, spec, label=failure.label)


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)
