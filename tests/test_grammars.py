import pytest

from hanslope.diagnostics import diagnostic_from_failure
from hanslope.ist import IstLeaf, reduce_cst
from hanslope.matchers import Matched, NotMatched
from tests._debug import debug_dump_cst, debug_dump_ist
from tests._grammars import (
    CALC,
    CALC_LABELS,
    STRING,
    BinOp,
    CalcLabel,
    Num,
    StringLabel,
    evaluate,
    transform_calc,
)


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("1", 1),
        ("1 + 2 * 3", 7),
        ("2 * 3 + 4", 10),
        ("2 * (3 + 4)", 14),
        ("10 - 4 - 3", 3),
        ("  ((8)) / 2 ", 4),
    ],
)
def test_calc_grammar_evaluates(source: str, expected: int) -> None:
    result = CALC["Expr"](source)
    assert isinstance(result, Matched)
    assert result.rest.strip() == ""

    ist = reduce_cst(result.output)
    debug_dump_cst(f"calc::{source}", source, result.output)
    debug_dump_ist(f"calc::{source}", ist)

    assert evaluate(transform_calc(ist)) == expected


def test_calc_grammar_builds_left_associative_tree() -> None:
    result = CALC["Expr"]("1 - 2 + 3")
    assert isinstance(result, Matched)

    assert transform_calc(reduce_cst(result.output)) == BinOp(
        op="+",
        left=BinOp(op="-", left=Num(1), right=Num(2)),
        right=Num(3),
    )


@pytest.mark.parametrize(
    ("source", "label", "column"),
    [
        ("", CalcLabel.EMPTY, 1),
        ("   ", CalcLabel.EMPTY, 1),
        ("1 +", CalcLabel.MISSING_OPERAND, 4),
        ("1 + * 2", CalcLabel.MISSING_OPERAND, 4),
        ("(1 + 2", CalcLabel.UNCLOSED_PARENS, 7),
        ("2 * (3 + (4)", CalcLabel.UNCLOSED_PARENS, 13),
    ],
)
def test_calc_grammar_reports_explicit_failures(source: str, label: CalcLabel, column: int) -> None:
    result = CALC["Expr"](source)

    assert isinstance(result, NotMatched)
    assert result.label == label
    diagnostic = diagnostic_from_failure(source, result, CALC_LABELS)
    assert diagnostic.position.column == column


def test_string_grammar_collapses_to_single_leaf() -> None:
    source = ' "a\\"b c"'
    result = STRING["String"](source)

    assert isinstance(result, Matched)
    assert result.rest == ""
    assert reduce_cst(result.output) == IstLeaf('"a\\"b c"')


def test_string_grammar_reports_unclosed_string() -> None:
    source = '"abcd\n'
    result = STRING["String"](source)

    assert isinstance(result, NotMatched)
    assert result.label == StringLabel.UNCLOSED_STRING
    assert diagnostic_from_failure(source, result).format() == "syntax invalid at line 2, column 1"
