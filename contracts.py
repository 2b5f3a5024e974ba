"""
contracts.py — Single source of truth for the data types of exprtree.
Every module imports tree and result types ONLY from here.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"

# Range of the fixed-width integers the trees were designed around.
INT_BITS = 64
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1


# ─────────────────────────── Operators ───────────────────────────────────

class UnaryOp(str, Enum):
    NEGATE = "-"


class BinaryOp(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"


# ─────────────────────────── Expression AST ──────────────────────────────

class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class NumberNode(_Node):
    node_type: Literal["number"] = "number"
    value: int = Field(ge=INT_MIN, le=INT_MAX)


class UnaryOpNode(_Node):
    node_type: Literal["unary"] = "unary"
    operand: "ExprAST"
    op: UnaryOp = UnaryOp.NEGATE


class BinOpNode(_Node):
    node_type: Literal["binop"] = "binop"
    left: "ExprAST"
    right: "ExprAST"
    op: BinaryOp


ExprAST = Union[NumberNode, UnaryOpNode, BinOpNode]
UnaryOpNode.model_rebuild()
BinOpNode.model_rebuild()


def is_leaf(node: ExprAST) -> bool:
    return isinstance(node, NumberNode)


def op_symbol(op: Union[UnaryOp, BinaryOp, str]) -> str:
    """Printable symbol of an operator, also for bare strings on unvalidated nodes."""
    return op.value if isinstance(op, Enum) else str(op)


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: Optional[int] = None                          # None = "no value"
    steps: list[str] = Field(default_factory=list)        # readable post-order steps
    diagnostics: list[str] = Field(default_factory=list)  # one per failure

    @property
    def ok(self) -> bool:
        return self.value is not None
