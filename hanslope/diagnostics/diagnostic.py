"""Diagnostics core types."""

from dataclasses import dataclass

from hanslope.diagnostics.codes import Severity
from hanslope.text import LineColumn, TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured report of a failed or incomplete parse."""

    code: str
    message: str
    range: TextRange
    position: LineColumn
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    label: str | None = None

    def format(self) -> str:
        return f"{self.message} at line {self.position.line}, column {self.position.column}"


class ParseError(Exception):
    """Raised when a caller asks for the tree of a parse that failed."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.format())
        self.diagnostic = diagnostic
