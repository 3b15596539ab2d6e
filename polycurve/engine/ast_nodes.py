"""Syntax tree node kinds produced by the parser."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class UnaryOp(enum.Enum):
    NEGATE = "-"


class BinaryOp(enum.Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Variable:
    """The indeterminate `x`."""


@dataclass(frozen=True)
class Unary:
    op: UnaryOp
    operand: "ASTNode"


@dataclass(frozen=True)
class BinOp:
    op: BinaryOp
    left: "ASTNode"
    right: "ASTNode"


@dataclass(frozen=True)
class Power:
    base: "ASTNode"
    exponent: "ASTNode"


ASTNode = Union[Number, Variable, Unary, BinOp, Power]
