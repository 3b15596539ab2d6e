"""Polynomial toolset returning `{"ok", "result"|"error", "method", "metadata"}` payloads."""

from __future__ import annotations

import math
import re
from typing import Any, Dict, List, Optional, Sequence

import sympy as sp

from polycurve.engine import (
    EPSILON,
    MAX_EXPONENT,
    PolynomialError,
    coefficients_equal,
    compile_expression,
    degree,
    derivative,
    evaluate_at,
    format_polynomial,
    integral,
    roots,
)
from polycurve.engine.ast_nodes import ASTNode, BinaryOp, BinOp, Number, Power, Unary, Variable
from polycurve.engine.normalizer import normalize_expression
from polycurve.engine.parser import parse_ast

POLYNOMIAL_TEXT_REGEX = re.compile(r"^[0-9x.+\-*/^()]+$")
BLOCKED_PATTERNS = ("__", "import", "exec", "eval")

_X = sp.Symbol("x")


class SanitizationError(ValueError):
    """Raised when an expression does not pass validation before reaching SymPy."""



def _ok(result: Any, method: str, **metadata: Any) -> Dict[str, Any]:
    return {"ok": True, "result": result, "method": method, "metadata": metadata}


def _error(message: str, method: str, **metadata: Any) -> Dict[str, Any]:
    return {"ok": False, "error": message, "method": method, "metadata": metadata}


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def compile_polynomial(
    expression: str,
    epsilon: float = EPSILON,
    max_exponent: int = MAX_EXPONENT,
    max_length: Optional[int] = None,
) -> Dict[str, Any]:
    try:
        coefficients = compile_expression(expression, epsilon=epsilon, max_exponent=max_exponent, max_length=max_length)
    except PolynomialError as exc:
        return _error(str(exc), "compile_polynomial", expression=expression, kind=exc.kind, position=exc.position)
    return _ok(
        list(coefficients),
        "recursive_descent",
        expression=expression,
        degree=degree(coefficients, epsilon),
        formatted=format_polynomial(coefficients, epsilon=epsilon),
    )


def analyze_polynomial(
    expression: str,
    points: Sequence[float] = (),
    integral_constant: float = 0.0,
    epsilon: float = EPSILON,
    decimals: int = 4,
    max_exponent: int = MAX_EXPONENT,
    max_length: Optional[int] = None,
) -> Dict[str, Any]:
    """Compiles `expression` and bundles derivative, integral, roots and point values."""
    try:
        coefficients = compile_expression(expression, epsilon=epsilon, max_exponent=max_exponent, max_length=max_length)
    except PolynomialError as exc:
        return _error(str(exc), "analyze_polynomial", expression=expression, kind=exc.kind, position=exc.position)

    slope = derivative(coefficients, epsilon)
    antiderivative = integral(coefficients, integral_constant, epsilon)
    result = {
        "coefficients": list(coefficients),
        "degree": degree(coefficients, epsilon),
        "formatted": format_polynomial(coefficients, decimals, epsilon),
        "derivative": list(slope),
        "derivative_formatted": format_polynomial(slope, decimals, epsilon),
        "integral": list(antiderivative),
        "integral_formatted": format_polynomial(antiderivative, decimals, epsilon),
        "roots": roots(coefficients, epsilon),
        "values": [{"x": float(x), "y": _finite_or_none(evaluate_at(coefficients, x))} for x in points],
    }
    return _ok(result, "recursive_descent", expression=expression, integral_constant=integral_constant)


def sanitize_polynomial_text(expression: str) -> str:
    """Normalizes `expression` and rejects anything outside the polynomial alphabet.

    Raises:
        SanitizationError: If the text is empty, contains a blocked pattern
            or has characters other than digits, `x`, `.`, operators and parentheses.
    """
    normalized = normalize_expression(expression or "")
    if not normalized:
        raise SanitizationError("Expression cannot be empty.")
    for pattern in BLOCKED_PATTERNS:
        if pattern in normalized:
            raise SanitizationError("Expression contains blocked pattern '{}'.".format(pattern))
    if not POLYNOMIAL_TEXT_REGEX.match(normalized):
        raise SanitizationError("Expression contains unsupported characters.")
    return normalized


def _to_sympy(node: ASTNode) -> Any:
    if isinstance(node, Number):
        return sp.Rational(repr(node.value))
    if isinstance(node, Variable):
        return _X
    if isinstance(node, Unary):
        return -_to_sympy(node.operand)
    if isinstance(node, BinOp):
        left, right = _to_sympy(node.left), _to_sympy(node.right)
        if node.op is BinaryOp.ADD:
            return left + right
        if node.op is BinaryOp.SUB:
            return left - right
        if node.op is BinaryOp.MUL:
            return left * right
        return left / right
    if isinstance(node, Power):
        exponent = sp.expand(_to_sympy(node.exponent))
        if not exponent.free_symbols:
            # constant exponents round half-up, like the engine
            exponent = sp.floor(exponent + sp.Rational(1, 2))
        return _to_sympy(node.base) ** exponent
    raise TypeError("Unsupported node {}".format(type(node).__name__))


def expand_with_sympy(expression: str) -> Dict[str, Any]:
    """Expands `expression` with SymPy and returns ascending coefficients.

    The text goes through the same normalizer and grammar as the engine, so
    `-x^2` means `(-x)^2` here too; the algebra itself is done by SymPy in
    exact rational arithmetic. No user text is ever handed to `parse_expr`.
    """
    try:
        tree = parse_ast(sanitize_polynomial_text(expression))
        poly = sp.Poly(sp.expand(_to_sympy(tree)), _X)
        coefficients: List[float] = [float(c) for c in reversed(poly.all_coeffs())]
        return _ok(coefficients, "sympy", expression=expression)
    except Exception as exc:
        return _error(str(exc), "expand_with_sympy", expression=expression)


def cross_check_expression(expression: str, epsilon: float = EPSILON) -> Dict[str, Any]:
    """Compares the engine's coefficient algebra for `expression` against a SymPy expansion."""
    engine = compile_polynomial(expression, epsilon=epsilon)
    if not engine["ok"]:
        return _error(engine["error"], "cross_check_expression", **engine["metadata"])
    reference = expand_with_sympy(expression)
    if not reference["ok"]:
        return _error(reference["error"], "cross_check_expression", expression=expression)

    scale = max([1.0] + [abs(c) for c in reference["result"]])
    matches = coefficients_equal(engine["result"], reference["result"], epsilon * scale)
    return _ok(
        matches,
        "sympy",
        expression=expression,
        engine=engine["result"],
        reference=reference["result"],
    )
