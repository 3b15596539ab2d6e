"""polycurve: compile single-variable polynomial expressions into coefficient vectors."""

from polycurve.engine import (
    EPSILON,
    MAX_EXPONENT,
    Coefficients,
    EmptyExpressionError,
    ExpressionSyntaxError,
    PolynomialError,
    PolynomialSemanticError,
    canonicalize,
    coefficients_equal,
    compile_expression,
    degree,
    derivative,
    evaluate_at,
    format_polynomial,
    integral,
    parse,
    roots,
)

__version__ = "1.0.0"

__all__ = [
    "EPSILON",
    "MAX_EXPONENT",
    "Coefficients",
    "EmptyExpressionError",
    "ExpressionSyntaxError",
    "PolynomialError",
    "PolynomialSemanticError",
    "canonicalize",
    "coefficients_equal",
    "compile_expression",
    "degree",
    "derivative",
    "evaluate_at",
    "format_polynomial",
    "integral",
    "parse",
    "roots",
]
