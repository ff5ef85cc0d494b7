"""Diagnostics."""

from hanslope.diagnostics.codes import (
    PARSE_SYNTAX_INVALID,
    PARSE_UNCONSUMED_INPUT,
    DiagnosticSpec,
    Severity,
)
from hanslope.diagnostics.diagnostic import Diagnostic, ParseError
from hanslope.diagnostics.report import (
    collect_diagnostics,
    diagnostic_at,
    diagnostic_from_failure,
    has_errors,
)

__all__ = [
    "PARSE_SYNTAX_INVALID",
    "PARSE_UNCONSUMED_INPUT",
    "Diagnostic",
    "DiagnosticSpec",
    "ParseError",
    "Severity",
    "collect_diagnostics",
    "diagnostic_at",
    "diagnostic_from_failure",
    "has_errors",
]
