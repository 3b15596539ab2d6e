"""Top-level expression pipeline: normalize, parse, evaluate, canonicalize."""

from __future__ import annotations

import math
from typing import Optional

from polycurve.utils.logger import get_logger

from .algebra import MAX_EXPONENT
from .canonical import EPSILON, Coefficients, canonicalize
from .errors import EmptyExpressionError, ExpressionSyntaxError, PolynomialError, PolynomialSemanticError
from .evaluator import evaluate_ast
from .normalizer import normalize_expression
from .parser import parse_ast

logger = get_logger("polycurve.engine")


def compile_expression(
    expression: str,
    epsilon: float = EPSILON,
    max_exponent: int = MAX_EXPONENT,
    max_length: Optional[int] = None,
) -> Coefficients:
    """Compiles free-form text into a canonical coefficient vector.

    Args:
        expression: Raw expression such as `"(x+1)^2*(x-1) - 3x"`.
        epsilon: Near-zero tolerance used for canonicalization.
        max_exponent: Largest accepted exponent.
        max_length: Optional cap on input length in characters; unbounded when None.

    Returns:
        Canonical coefficient tuple in ascending power order.

    Raises:
        EmptyExpressionError: If the input is blank.
        ExpressionSyntaxError: If the input does not match the grammar.
        PolynomialSemanticError: If the tree does not reduce to a polynomial.
    """
    if not expression or not expression.strip():
        raise EmptyExpressionError("Expression cannot be empty.")
    if max_length is not None and len(expression) > max_length:
        raise ExpressionSyntaxError("Expression exceeds max length of {} characters.".format(max_length))

    normalized = normalize_expression(expression)
    try:
        tree = parse_ast(normalized)
        coefficients = evaluate_ast(tree, epsilon=epsilon, max_exponent=max_exponent)
    except RecursionError as exc:
        raise ExpressionSyntaxError("Expression is nested too deeply.") from exc

    if not all(math.isfinite(c) for c in coefficients):
        raise PolynomialSemanticError("Expression produces a non-finite coefficient.")
    return canonicalize(coefficients, epsilon)


def parse(
    expression: str,
    epsilon: float = EPSILON,
    max_exponent: int = MAX_EXPONENT,
    max_length: Optional[int] = None,
) -> Optional[Coefficients]:
    """Compiles `expression`, returning None when it is invalid for any reason."""
    try:
        return compile_expression(expression, epsilon=epsilon, max_exponent=max_exponent, max_length=max_length)
    except PolynomialError as exc:
        logger.debug("Rejected expression %r: %s", expression, exc, extra={"extra": {"kind": exc.kind}})
        return None
