"""
Port: Renderer
Responsibility: read-only textual views of an expression tree.
"""
from typing import Iterator, Protocol, runtime_checkable

from contracts import ExprAST


@runtime_checkable
class InfixRenderer(Protocol):
    def render(self, ast: ExprAST) -> str:
        """
        Renders the tree as a single-line infix string, operators surrounded
        by single spaces. Parenthesization follows the tree shape only
        (leaf / unary / binary children), never operator precedence.
        """
        ...


@runtime_checkable
class TreeRenderer(Protocol):
    def iter_lines(self, ast: ExprAST) -> Iterator[str]:
        """Yields one line per node, pre-order, left child before right."""
        ...

    def render_tree(self, ast: ExprAST) -> str:
        """Lines of iter_lines() joined with newlines, no trailing newline."""
        ...
