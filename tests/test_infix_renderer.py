from __future__ import annotations

from adapters.renderer.infix_renderer import ParenInfixRenderer, render
from contracts import BinOpNode, NumberNode, UnaryOpNode
from ports.renderer import InfixRenderer
from samples import SAMPLES


def _num(value: int) -> NumberNode:
    return NumberNode(value=value)


def test_two_leaves_have_no_parentheses():
    assert render(SAMPLES["sum"]) == "10 + 20"


def test_binary_child_next_to_leaf_is_parenthesized():
    assert render(SAMPLES["sum-times"]) == "(10 + 20) * 30"
    assert render(SAMPLES["plus-product"]) == "10 + (20 * 30)"


def test_unary_child_next_to_leaf_is_parenthesized():
    assert render(SAMPLES["negated-div"]) == "(-10) / 2"
    ast = BinOpNode(op="-", left=_num(3), right=UnaryOpNode(operand=_num(4)))
    assert render(ast) == "3 - (-4)"


def test_two_compound_children_are_both_parenthesized():
    ast = BinOpNode(
        op="+",
        left=BinOpNode(op="*", left=_num(1), right=_num(2)),
        right=BinOpNode(op="*", left=_num(3), right=_num(4)),
    )

    assert render(ast) == "(1 * 2) + (3 * 4)"


def test_unary_and_binary_children_are_both_parenthesized():
    ast = BinOpNode(
        op="%",
        left=UnaryOpNode(operand=_num(9)),
        right=BinOpNode(op="-", left=_num(5), right=_num(1)),
    )

    assert render(ast) == "(-9) % (5 - 1)"


def test_unary_operand_parenthesized_unless_leaf():
    assert render(UnaryOpNode(operand=_num(5))) == "-5"
    assert render(UnaryOpNode(operand=UnaryOpNode(operand=_num(5)))) == "-(-5)"
    assert render(UnaryOpNode(operand=SAMPLES["sum"])) == "-(10 + 20)"


def test_negative_literal_renders_as_its_value():
    assert render(_num(-3)) == "-3"
    assert render(UnaryOpNode(operand=_num(-3))) == "--3"


def test_reference_tree():
    assert render(SAMPLES["reference"]) == "((((-(10 + 20)) + 30) + 40) + (50 + 60)) * (-5)"


def test_render_is_idempotent():
    renderer = ParenInfixRenderer()
    ast = SAMPLES["reference"]

    assert renderer.render(ast) == renderer.render(ast)


def test_renderer_satisfies_port():
    assert isinstance(ParenInfixRenderer(), InfixRenderer)


def test_unvalidated_nodes_with_bare_symbols():
    ast = BinOpNode.model_construct(
        op="*",
        left=UnaryOpNode.model_construct(op="-", operand=_num(2)),
        right=_num(3),
    )

    assert render(ast) == "(-2) * 3"


def test_deep_tree_does_not_hit_recursion_limit():
    depth = 5000
    ast = _num(1)
    for _ in range(depth):
        ast = UnaryOpNode(operand=ast)

    assert render(ast) == "-(" * (depth - 1) + "-1" + ")" * (depth - 1)
