import pytest

from hanslope.ist import IstBranch, IstLeaf, IstSequence
from hanslope.transform import (
    bind_any,
    bind_leaf,
    bind_sequence,
    ist_transformer,
    rewrite,
    rule,
)


def test_rewrite_is_bottom_up() -> None:
    rules = [
        rule("a", lambda: IstLeaf("1")),
        rule({"foo": "1"}, lambda: IstLeaf("2")),
    ]

    assert rewrite(rules, IstBranch({"foo": IstLeaf("a")})) == IstLeaf("2")


@pytest.mark.parametrize(
    "node",
    [
        IstLeaf("b"),
        IstLeaf(None),
        IstSequence((IstLeaf("x"), IstBranch({"k": IstLeaf("v")}))),
        IstBranch({"other": IstLeaf("a")}),
    ],
)
def test_rewrite_without_matching_rule_is_identity(node: object) -> None:
    assert rewrite([rule({"foo": bind_any("x")}, lambda x: IstLeaf("nope"))], node) == node


def test_rule_apply_is_replace_or_identity() -> None:
    sut = rule({"a": bind_leaf("a"), "b": "fixed"}, lambda a: IstLeaf(a * 2))

    assert sut.apply(IstBranch({"a": IstLeaf("x"), "b": IstLeaf("fixed")})) == IstLeaf("xx")
    partial = IstBranch({"a": IstLeaf("x"), "b": IstLeaf("other")})
    assert sut.apply(partial) is partial


def test_first_matching_rule_wins() -> None:
    rules = [
        rule(bind_leaf("v"), lambda v: f"first:{v}"),
        rule("a", lambda: "second"),
    ]

    assert rewrite(rules, IstLeaf("a")) == "first:a"


def test_rewrite_is_single_pass_not_fixpoint() -> None:
    rules = [
        rule("a", lambda: IstLeaf("b")),
        rule("b", lambda: IstLeaf("c")),
    ]

    assert rewrite(rules, IstLeaf("a")) == IstLeaf("b")
    assert rewrite(rules, IstSequence((IstLeaf("a"), IstLeaf("b")))) == IstSequence((IstLeaf("b"), IstLeaf("c")))


def test_rewrite_sequence_elements_before_sequence_itself() -> None:
    rules = [
        rule({"n": bind_leaf("n")}, lambda n: int(n)),
        rule(bind_sequence("values"), lambda values: sum(values)),
    ]
    node = IstSequence(
        (
            IstBranch({"n": IstLeaf("1")}),
            IstBranch({"n": IstLeaf("2")}),
            IstBranch({"n": IstLeaf("3")}),
        )
    )

    assert rewrite(rules, node) == 6


def test_rewrite_does_not_mutate_input_tree() -> None:
    inner = IstBranch({"n": IstLeaf("1")})
    node = IstSequence((inner,))

    rewrite([rule({"n": bind_leaf("n")}, lambda n: int(n))], node)

    assert node == IstSequence((IstBranch({"n": IstLeaf("1")}),))
    assert node.elements[0] is inner


def test_ist_transformer_reuses_rule_set() -> None:
    transform = ist_transformer(
        rule({"name": bind_leaf("name")}, lambda name: ("Name", name)),
        rule({"rules": bind_sequence("rules")}, lambda rules: list(rules)),
    )
    node = IstBranch(
        {
            "rules": IstSequence(
                (
                    IstBranch({"name": IstLeaf("a")}),
                    IstBranch({"name": IstLeaf("b")}),
                )
            )
        }
    )

    assert transform(node) == [("Name", "a"), ("Name", "b")]
    assert transform(IstBranch({"name": IstLeaf("c")})) == ("Name", "c")
