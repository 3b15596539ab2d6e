"""Recursive-descent parser for normalized polynomial expressions.

Grammar, lowest to highest precedence::

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := primary ('^' factor)?
    primary    := '(' expression ')' | '-' primary | '+' primary | 'x' | number
    number     := digit+ ('.' digit+)?
"""

from __future__ import annotations

import math

from .ast_nodes import ASTNode, BinaryOp, BinOp, Number, Power, Unary, UnaryOp, Variable
from .errors import ExpressionSyntaxError

_ADDITIVE = {"+": BinaryOp.ADD, "-": BinaryOp.SUB}
_MULTIPLICATIVE = {"*": BinaryOp.MUL, "/": BinaryOp.DIV}


class _Cursor:
    """Character-level lookahead over the normalized text."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def advance(self) -> str:
        char = self.peek()
        self.pos += 1
        return char

    def at_end(self) -> bool:
        return self.pos >= len(self.text)


def parse_ast(text: str) -> ASTNode:
    """Parses a normalized expression into a syntax tree.

    Args:
        text: Output of `normalize_expression`.

    Returns:
        Root node of the tree.

    Raises:
        ExpressionSyntaxError: On unknown characters, unbalanced parentheses,
            malformed numbers or trailing input.
    """
    cursor = _Cursor(text)
    node = _parse_expression(cursor)
    if not cursor.at_end():
        raise ExpressionSyntaxError(
            "Unexpected character '{}' at position {}".format(cursor.peek(), cursor.pos),
            position=cursor.pos,
        )
    return node


def _parse_expression(cursor: _Cursor) -> ASTNode:
    left = _parse_term(cursor)
    while cursor.peek() in _ADDITIVE:
        op = _ADDITIVE[cursor.advance()]
        left = BinOp(op, left, _parse_term(cursor))
    return left


def _parse_term(cursor: _Cursor) -> ASTNode:
    left = _parse_factor(cursor)
    while cursor.peek() in _MULTIPLICATIVE:
        op = _MULTIPLICATIVE[cursor.advance()]
        left = BinOp(op, left, _parse_factor(cursor))
    return left


def _parse_factor(cursor: _Cursor) -> ASTNode:
    base = _parse_primary(cursor)
    if cursor.peek() == "^":
        cursor.advance()
        # right-associative: 2^3^2 is 2^(3^2)
        return Power(base, _parse_factor(cursor))
    return base


def _parse_primary(cursor: _Cursor) -> ASTNode:
    char = cursor.peek()
    if char == "(":
        cursor.advance()
        inner = _parse_expression(cursor)
        if cursor.peek() != ")":
            raise ExpressionSyntaxError("Expected ')' at position {}".format(cursor.pos), position=cursor.pos)
        cursor.advance()
        return inner
    if char == "-":
        cursor.advance()
        return Unary(UnaryOp.NEGATE, _parse_primary(cursor))
    if char == "+":
        cursor.advance()
        return _parse_primary(cursor)
    if char == "x":
        cursor.advance()
        return Variable()
    return _parse_number(cursor)


def _parse_number(cursor: _Cursor) -> Number:
    start = cursor.pos
    _consume_digits(cursor)
    if cursor.pos == start:
        if cursor.at_end():
            raise ExpressionSyntaxError("Unexpected end of expression", position=start)
        raise ExpressionSyntaxError(
            "Unexpected character '{}' at position {}".format(cursor.peek(), start),
            position=start,
        )

    if cursor.peek() == ".":
        cursor.advance()
        fraction_start = cursor.pos
        _consume_digits(cursor)
        if cursor.pos == fraction_start:
            raise ExpressionSyntaxError("Malformed number at position {}".format(start), position=start)

    literal = cursor.text[start:cursor.pos]
    value = float(literal)
    if not math.isfinite(value):
        raise ExpressionSyntaxError("Number '{}' is not finite".format(literal), position=start)
    return Number(value)


def _consume_digits(cursor: _Cursor) -> None:
    while cursor.peek().isdigit() and cursor.peek().isascii():
        cursor.advance()
