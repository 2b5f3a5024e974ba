"""
Adapter: BoxTreeRenderer
Implements the TreeRenderer port — one node per line, pre-order.

    *
    ├─ +
    | ├─ 10
    | └─ 20
    └─ 30

A non-root node at depth `level` is prefixed with `level - 1` copies of
"| " and then "└─ " (unary operand, right child) or "├─ " (left child).
"""
from __future__ import annotations

from typing import Iterator

from contracts import BinOpNode, ExprAST, NumberNode, UnaryOpNode, op_symbol

_CONTINUE = "| "
_BRANCH_UNICODE = ("├─ ", "└─ ")
_BRANCH_ASCII = ("|- ", "`- ")


class BoxTreeRenderer:
    """Indented branch diagram of an expression tree."""

    def __init__(self, ascii_only: bool = False) -> None:
        self._mid, self._last = _BRANCH_ASCII if ascii_only else _BRANCH_UNICODE

    # -- TreeRenderer protocol ---------------------------------------------

    def iter_lines(self, ast: ExprAST) -> Iterator[str]:
        # Pre-order on an explicit stack: right pushed before left.
        stack: list[tuple[ExprAST, int, bool]] = [(ast, 0, True)]
        while stack:
            node, level, last = stack.pop()
            prefix = ""
            if level > 0:
                prefix = _CONTINUE * (level - 1) + (self._last if last else self._mid)

            if isinstance(node, NumberNode):
                yield f"{prefix}{node.value}"
            elif isinstance(node, UnaryOpNode):
                yield f"{prefix}{op_symbol(node.op)}"
                stack.append((node.operand, level + 1, True))
            elif isinstance(node, BinOpNode):
                yield f"{prefix}{op_symbol(node.op)}"
                stack.append((node.right, level + 1, True))
                stack.append((node.left, level + 1, False))
            else:
                raise TypeError(f"Unknown AST node type: {type(node)}")

    def render_tree(self, ast: ExprAST) -> str:
        return "\n".join(self.iter_lines(ast))


def render_tree(ast: ExprAST) -> str:
    return BoxTreeRenderer().render_tree(ast)
