"""
Port: Evaluator
Responsibility: deterministic integer evaluation of an expression tree.
"""
from typing import Optional, Protocol, runtime_checkable

from contracts import EvalResult, ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, ast: ExprAST) -> Optional[int]:
        """
        Evaluates an expression tree to an integer.
        Returns None ("no value") when a division by zero occurs anywhere in
        the tree or when the result leaves the configured integer range;
        the failure propagates through every enclosing operation.
        Emits one diagnostic per failure on the "exprtree.evaluator" logger.
        Raises ValueError / TypeError for malformed trees.
        """
        ...

    def eval_expr(self, ast: ExprAST) -> EvalResult:
        """
        Same traversal as evaluate(), returning EvalResult with:
          - value: int or None
          - steps: human-readable post-order computation steps
          - diagnostics: the messages emitted during this call
        """
        ...
