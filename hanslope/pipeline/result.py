"""Parse carrier exposing the CST, IST and rewritten tree of one parse."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from hanslope.cst import CstNode
from hanslope.diagnostics import (
    Diagnostic,
    ParseError,
    diagnostic_from_failure,
    has_errors,
)
from hanslope.ist import IstNode, reduce_cst
from hanslope.matchers import Matched, MatchResult
from hanslope.pipeline.options import ParseOptions
from hanslope.transform import Rule, rewrite


@dataclass(slots=True)
class ParseResult:
    """Parse-once/consume-many carrier; trees are built lazily and cached."""

    source_text: str
    result: MatchResult[CstNode]
    options: ParseOptions
    diagnostics: list[Diagnostic]
    rules: tuple[Rule, ...] = ()
    _ist_root: IstNode | None = field(default=None, init=False, repr=False)
    _ast_root: Any = field(default=None, init=False, repr=False)
    _has_ast_root: bool = field(default=False, init=False, repr=False)

    @property
    def ok(self) -> bool:
        return isinstance(self.result, Matched) and not self.has_errors

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def rest(self) -> str:
        return self.result.rest

    def unwrap(self) -> CstNode:
        """Concrete tree of a successful parse, or `ParseError`."""
        for diagnostic in self.diagnostics:
            if diagnostic.severity == "error":
                raise ParseError(diagnostic)
        if not isinstance(self.result, Matched):
            raise ParseError(diagnostic_from_failure(self.source_text, self.result, self.options.labels))
        return self.result.output

    def cst_root(self) -> CstNode:
        return self.unwrap()

    def ist_root(self) -> IstNode:
        if self._ist_root is None:
            self._ist_root = reduce_cst(self.unwrap())
        return self._ist_root

    def ast_root(self) -> Any:
        """The IST rewritten with this parse's rule set."""
        if not self._has_ast_root:
            self._ast_root = rewrite(self.rules, self.ist_root())
            self._has_ast_root = True
        return self._ast_root
