"""Reduces a syntax tree to a coefficient vector using the algebra primitives."""

from __future__ import annotations

import math

from . import algebra
from .ast_nodes import ASTNode, BinaryOp, BinOp, Number, Power, Unary, UnaryOp, Variable
from .canonical import EPSILON, Coefficients
from .errors import PolynomialSemanticError


def evaluate_ast(node: ASTNode, epsilon: float = EPSILON, max_exponent: int = algebra.MAX_EXPONENT) -> Coefficients:
    """Walks the tree bottom-up and returns the raw (non-canonical) coefficients.

    Args:
        node: Root of the tree built by `parse_ast`.
        epsilon: Tolerance used for the zero-divisor check.
        max_exponent: Largest exponent accepted by `^`.

    Returns:
        Coefficient tuple in ascending power order.

    Raises:
        PolynomialSemanticError: For division by a non-constant or zero,
            unsupported exponents, or unknown node kinds.
    """
    if isinstance(node, Number):
        return (node.value,)
    if isinstance(node, Variable):
        return (0.0, 1.0)
    if isinstance(node, Unary):
        operand = evaluate_ast(node.operand, epsilon, max_exponent)
        if node.op is UnaryOp.NEGATE:
            return algebra.negate(operand)
        raise PolynomialSemanticError("Unsupported unary operator {}".format(node.op))
    if isinstance(node, BinOp):
        left = evaluate_ast(node.left, epsilon, max_exponent)
        right = evaluate_ast(node.right, epsilon, max_exponent)
        return _evaluate_binop(node.op, left, right, epsilon)
    if isinstance(node, Power):
        base = evaluate_ast(node.base, epsilon, max_exponent)
        exponent = evaluate_ast(node.exponent, epsilon, max_exponent)
        return algebra.power(base, _constant_exponent(exponent), max_exponent)
    raise PolynomialSemanticError("Unsupported node {}".format(type(node).__name__))


def _evaluate_binop(op: BinaryOp, left: Coefficients, right: Coefficients, epsilon: float) -> Coefficients:
    if op is BinaryOp.ADD:
        return algebra.add(left, right)
    if op is BinaryOp.SUB:
        return algebra.subtract(left, right)
    if op is BinaryOp.MUL:
        return algebra.multiply(left, right)
    if op is BinaryOp.DIV:
        if len(right) != 1:
            raise PolynomialSemanticError("Division by a non-constant expression is not supported")
        quotient = algebra.divide_by_scalar(left, right[0], epsilon)
        if quotient is None:
            raise PolynomialSemanticError("Division by zero")
        return quotient
    raise PolynomialSemanticError("Unsupported binary operator {}".format(op))


def _constant_exponent(exponent: Coefficients) -> int:
    # the raw vector must already be a single coefficient; x-x+2 does not qualify
    if len(exponent) != 1:
        raise PolynomialSemanticError("Exponent must be a constant")
    value = exponent[0]
    if not math.isfinite(value):
        raise PolynomialSemanticError("Exponent must be finite")
    return int(math.floor(value + 0.5))
