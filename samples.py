"""
samples.py — Reference expression trees, built by direct construction.

The CLI prints these; the tests check their values and renderings.
"""
from __future__ import annotations

from contracts import BinOpNode, ExprAST, NumberNode, UnaryOpNode


def _reference() -> ExprAST:
    # ((( -(10 + 20) + 30) + 40) + (50 + 60)) * -5
    negated_sum = UnaryOpNode(
        operand=BinOpNode(op="+", left=NumberNode(value=10), right=NumberNode(value=20)),
    )
    chain = BinOpNode(
        op="+",
        left=BinOpNode(
            op="+",
            left=BinOpNode(op="+", left=negated_sum, right=NumberNode(value=30)),
            right=NumberNode(value=40),
        ),
        right=BinOpNode(op="+", left=NumberNode(value=50), right=NumberNode(value=60)),
    )
    return BinOpNode(op="*", left=chain, right=UnaryOpNode(operand=NumberNode(value=5)))


SAMPLES: dict[str, ExprAST] = {
    "sum": BinOpNode(op="+", left=NumberNode(value=10), right=NumberNode(value=20)),
    "div-by-zero": BinOpNode(op="/", left=NumberNode(value=10), right=NumberNode(value=0)),
    "sum-times": BinOpNode(
        op="*",
        left=BinOpNode(op="+", left=NumberNode(value=10), right=NumberNode(value=20)),
        right=NumberNode(value=30),
    ),
    "plus-product": BinOpNode(
        op="+",
        left=NumberNode(value=10),
        right=BinOpNode(op="*", left=NumberNode(value=20), right=NumberNode(value=30)),
    ),
    "negated-div": BinOpNode(
        op="/",
        left=UnaryOpNode(operand=NumberNode(value=10)),
        right=NumberNode(value=2),
    ),
    "reference": _reference(),
}


def get_sample(name: str) -> ExprAST:
    try:
        return SAMPLES[name]
    except KeyError:
        raise KeyError(f"Unknown sample: {name!r} (known: {', '.join(SAMPLES)})") from None
