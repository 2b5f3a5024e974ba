"""
Adapter: ASTEvaluator
Implements the Evaluator port — post-order walk of ExprAST on an explicit stack.

Integers follow the fixed-width semantics the trees were designed for:
division truncates toward zero and the remainder takes the sign of the
dividend. What happens outside the 64-bit range is set by Settings.overflow.

evaluate()  — value or None ("no value")
eval_expr() — EvalResult with value, computation steps and diagnostics
"""
from __future__ import annotations

import logging
from typing import Optional

from config import Settings, get_settings
from contracts import (
    INT_BITS,
    INT_MAX,
    INT_MIN,
    BinaryOp,
    BinOpNode,
    EvalResult,
    ExprAST,
    NumberNode,
    UnaryOp,
    UnaryOpNode,
)

logger = logging.getLogger("exprtree.evaluator")


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


# Divisor is already known to be non-zero when these run.
_OP_FUNCS = {
    BinaryOp.ADD: lambda a, b: a + b,
    BinaryOp.SUB: lambda a, b: a - b,
    BinaryOp.MUL: lambda a, b: a * b,
    BinaryOp.DIV: _trunc_div,
    BinaryOp.MOD: _trunc_mod,
}


def _binary_op(op: object) -> BinaryOp:
    try:
        return BinaryOp(op)
    except ValueError:
        raise ValueError(f"Unknown binary operator: {op!r}") from None


def _unary_op(op: object) -> UnaryOp:
    try:
        return UnaryOp(op)
    except ValueError:
        raise ValueError(f"Unknown unary operator: {op!r}") from None


class ASTEvaluator:
    """Integer evaluator for expression trees."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, ast: ExprAST) -> Optional[int]:
        return self.eval_expr(ast).value

    def eval_expr(self, ast: ExprAST) -> EvalResult:
        steps: list[str] = []
        diagnostics: list[str] = []
        value = self._eval(ast, steps, diagnostics)
        return EvalResult(value=value, steps=steps, diagnostics=diagnostics)

    # -- Private -----------------------------------------------------------

    def _eval(
        self,
        ast: ExprAST,
        steps: list[str],
        diagnostics: list[str],
    ) -> Optional[int]:
        """Post-order walk on an explicit stack; depth is bounded by memory only."""
        values: list[Optional[int]] = []
        stack: list[tuple[ExprAST, bool]] = [(ast, False)]
        while stack:
            node, expanded = stack.pop()

            if isinstance(node, NumberNode):
                values.append(node.value)

            elif isinstance(node, UnaryOpNode):
                if not expanded:
                    stack.append((node, True))
                    stack.append((node.operand, False))
                    continue
                val = values.pop()
                if val is None:
                    values.append(None)
                    continue
                _unary_op(node.op)
                values.append(self._record(-val, f"-({val})", steps, diagnostics))

            elif isinstance(node, BinOpNode):
                # Both sides run so that every failure below this node is reported.
                if not expanded:
                    stack.append((node, True))
                    stack.append((node.right, False))
                    stack.append((node.left, False))
                    continue
                right = values.pop()
                left = values.pop()
                values.append(self._apply(node, left, right, steps, diagnostics))

            else:
                raise TypeError(f"Unknown AST node type: {type(node)}")

        return values.pop()

    def _apply(
        self,
        node: BinOpNode,
        left: Optional[int],
        right: Optional[int],
        steps: list[str],
        diagnostics: list[str],
    ) -> Optional[int]:
        if left is None or right is None:
            return None
        op = _binary_op(node.op)

        if right == 0 and op is BinaryOp.DIV:
            self._fail(f"Division by zero is not allowed: {left} / 0", diagnostics)
            return None
        if right == 0 and op is BinaryOp.MOD:
            if self._settings.modulo_by_zero == "fault":
                raise ZeroDivisionError(f"Remainder by zero: {left} % 0")
            self._fail(f"Remainder by zero is not allowed: {left} % 0", diagnostics)
            return None

        result = _OP_FUNCS[op](left, right)
        return self._record(result, f"{left} {op.value} {right}", steps, diagnostics)

    def _record(
        self,
        value: int,
        expr: str,
        steps: list[str],
        diagnostics: list[str],
    ) -> Optional[int]:
        """Applies the overflow policy and logs the step when a value survives."""
        mode = self._settings.overflow
        if mode == "wrap":
            value = (value - INT_MIN) % (1 << INT_BITS) + INT_MIN
        elif mode == "checked" and not INT_MIN <= value <= INT_MAX:
            self._fail(f"Integer overflow: {expr} is out of {INT_BITS}-bit range", diagnostics)
            return None
        steps.append(f"{expr} = {value}")
        return value

    @staticmethod
    def _fail(message: str, diagnostics: list[str]) -> None:
        logger.warning(message)
        diagnostics.append(message)


def evaluate(ast: ExprAST) -> Optional[int]:
    """Evaluates with the cached environment Settings."""
    return ASTEvaluator(get_settings()).evaluate(ast)
