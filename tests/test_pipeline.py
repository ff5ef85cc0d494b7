import pytest

from hanslope.cst import CstLeaf, CstTagged
from hanslope.diagnostics import PARSE_UNCONSUMED_INPUT, ParseError
from hanslope.ist import IstBranch, IstLeaf
from hanslope.pipeline import ParseMode, ParseOptions, parse
from hanslope.text import LineColumn
from hanslope.transform import bind_any, rule
from tests._debug import debug_dump_diagnostics
from tests._grammars import CALC, CALC_LABELS, CALC_RULES, BinOp, CalcLabel, Num


def test_parse_success_exposes_trees() -> None:
    result = parse(CALC["Number"], "42")

    assert result.ok is True
    assert result.diagnostics == []
    assert result.has_errors is False
    assert result.ist_root() == IstBranch({"num": IstLeaf("42")})
    assert result.cst_root() == CstTagged("num", CstLeaf("42"))


def test_parse_result_caches_ist_and_ast() -> None:
    result = parse(CALC["Expr"], "1 + 2", rules=CALC_RULES)

    assert result.ist_root() is result.ist_root()
    first_ast = result.ast_root()
    assert first_ast is result.ast_root()
    assert first_ast == BinOp(op="+", left=Num(1), right=Num(2))


def test_parse_without_rules_returns_ist_as_ast() -> None:
    result = parse(CALC["Number"], "7")

    assert result.ast_root() == result.ist_root()


def test_parse_failure_reports_labeled_diagnostic() -> None:
    options = ParseOptions(labels=CALC_LABELS)
    result = parse(CALC["Expr"], "(1 + 2", options)
    debug_dump_diagnostics("pipeline_unclosed_parens", result.diagnostics)

    assert result.ok is False
    assert result.has_errors is True
    [diagnostic] = result.diagnostics
    assert diagnostic.code == "CALC_UNCLOSED_PARENS"
    assert diagnostic.label == CalcLabel.UNCLOSED_PARENS
    assert diagnostic.position == LineColumn(line=1, column=7)

    with pytest.raises(ParseError, match="expected '\\)' to close matching '\\(' at line 1, column 7"):
        result.ist_root()


def test_strict_mode_rejects_leftover_input() -> None:
    result = parse(CALC["Expr"], "1 + 2 3\n")

    assert result.ok is False
    [diagnostic] = result.diagnostics
    assert diagnostic.code == PARSE_UNCONSUMED_INPUT.code
    assert diagnostic.position == LineColumn(line=1, column=7)
    with pytest.raises(ParseError):
        result.unwrap()


def test_strict_mode_allows_trailing_whitespace() -> None:
    result = parse(CALC["Expr"], "1 + 2  \n")

    assert result.ok is True


def test_prefix_mode_allows_leftover_input() -> None:
    result = parse(CALC["Expr"], "1 + 2 3", mode=ParseMode.PREFIX, rules=CALC_RULES)

    assert result.ok is True
    assert result.rest == " 3"
    assert result.ast_root() == BinOp(op="+", left=Num(1), right=Num(2))


def test_parse_rejects_options_and_mode_together() -> None:
    with pytest.raises(ValueError, match="either options or mode"):
        parse(CALC["Expr"], "1", ParseOptions(), mode=ParseMode.STRICT)


def test_parse_options_for_mode() -> None:
    assert ParseOptions.for_mode(ParseMode.PREFIX).requires_full_input is False
    assert ParseOptions().requires_full_input is True


def test_parse_options_labels_are_read_only_copy() -> None:
    labels = dict(CALC_LABELS)
    options = ParseOptions(labels=labels)
    labels.clear()

    assert options.labels == CALC_LABELS
    with pytest.raises(TypeError):
        options.labels["extra"] = CALC_LABELS[CalcLabel.EMPTY]  # type: ignore[index]
    assert ParseOptions().labels == {}


def test_transforms_cannot_edit_cached_ist() -> None:
    seen: list[IstBranch] = []

    def try_edit(node: object) -> object:
        if isinstance(node, IstBranch):
            seen.append(node)
            with pytest.raises(TypeError):
                node.entries["num"] = IstLeaf("0")  # type: ignore[index]
        return node

    result = parse(CALC["Number"], "42", rules=[rule(bind_any("node"), try_edit)])
    result.ast_root()

    assert seen
    assert result.ist_root() == IstBranch({"num": IstLeaf("42")})
