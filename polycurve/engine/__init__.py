"""Single-variable polynomial expression compiler and analysis primitives."""

from .algebra import MAX_EXPONENT, add, divide_by_scalar, multiply, negate, power, subtract
from .analysis import degree, derivative, evaluate_at, integral, roots
from .canonical import EPSILON, Coefficients, canonicalize, coefficients_equal
from .compiler import compile_expression, parse
from .errors import EmptyExpressionError, ExpressionSyntaxError, PolynomialError, PolynomialSemanticError
from .formatter import format_polynomial

__all__ = [
    "EPSILON",
    "MAX_EXPONENT",
    "Coefficients",
    "add",
    "subtract",
    "negate",
    "multiply",
    "divide_by_scalar",
    "power",
    "canonicalize",
    "coefficients_equal",
    "compile_expression",
    "parse",
    "evaluate_at",
    "degree",
    "derivative",
    "integral",
    "roots",
    "format_polynomial",
    "PolynomialError",
    "EmptyExpressionError",
    "ExpressionSyntaxError",
    "PolynomialSemanticError",
]
