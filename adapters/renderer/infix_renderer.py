"""
Adapter: ParenInfixRenderer
Implements the InfixRenderer port.

Parentheses depend on the shape of the tree only: every child that is not a
leaf is wrapped, every leaf is written bare. Operator precedence is never
consulted, so `(10 + 20) * 30` and `(1 * 2) + (3 * 4)` keep their brackets.
"""
from __future__ import annotations

from contracts import BinOpNode, ExprAST, NumberNode, UnaryOpNode, is_leaf, op_symbol


class ParenInfixRenderer:
    """Single-line infix form with structural parenthesization."""

    def render(self, ast: ExprAST) -> str:
        # Post-order on an explicit stack; `texts` holds rendered children.
        texts: list[str] = []
        stack: list[tuple[ExprAST, bool]] = [(ast, False)]
        while stack:
            node, expanded = stack.pop()

            if isinstance(node, NumberNode):
                texts.append(str(node.value))

            elif isinstance(node, UnaryOpNode):
                if not expanded:
                    stack.append((node, True))
                    stack.append((node.operand, False))
                    continue
                operand = _wrap(node.operand, texts.pop())
                texts.append(f"{op_symbol(node.op)}{operand}")

            elif isinstance(node, BinOpNode):
                if not expanded:
                    stack.append((node, True))
                    stack.append((node.right, False))
                    stack.append((node.left, False))
                    continue
                right = _wrap(node.right, texts.pop())
                left = _wrap(node.left, texts.pop())
                texts.append(f"{left} {op_symbol(node.op)} {right}")

            else:
                raise TypeError(f"Unknown AST node type: {type(node)}")

        return texts.pop()


def _wrap(node: ExprAST, text: str) -> str:
    return text if is_leaf(node) else f"({text})"


def render(ast: ExprAST) -> str:
    return ParenInfixRenderer().render(ast)
