"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSE_SYNTAX_INVALID: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE_SYNTAX_INVALID",
    message="syntax invalid",
    severity="error",
    category="parser",
)

PARSE_UNCONSUMED_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSE_UNCONSUMED_INPUT",
    message="unexpected input after the end of the parse",
    hint="Remove the trailing text or parse with ParseMode.PREFIX.",
    severity="error",
    category="parser",
)
