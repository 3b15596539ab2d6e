"""Pure polynomial algebra over coefficient vectors.

Vectors are in ascending power order. No function mutates its inputs; every
result is a new tuple and is not canonicalized.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .canonical import EPSILON, Coefficients
from .errors import PolynomialSemanticError

MAX_EXPONENT = 50


def add(left: Sequence[float], right: Sequence[float]) -> Coefficients:
    size = max(len(left), len(right))
    result = [0.0] * size
    for i, c in enumerate(left):
        result[i] += c
    for i, c in enumerate(right):
        result[i] += c
    return tuple(result)


def subtract(left: Sequence[float], right: Sequence[float]) -> Coefficients:
    size = max(len(left), len(right))
    result = [0.0] * size
    for i, c in enumerate(left):
        result[i] += c
    for i, c in enumerate(right):
        result[i] -= c
    return tuple(result)


def negate(coefficients: Sequence[float]) -> Coefficients:
    return tuple(-c for c in coefficients)


def multiply(left: Sequence[float], right: Sequence[float]) -> Coefficients:
    """Full convolution: `result[i + j] += left[i] * right[j]`."""
    if not left or not right:
        return ()
    result = [0.0] * (len(left) + len(right) - 1)
    for i, a in enumerate(left):
        for j, b in enumerate(right):
            result[i + j] += a * b
    return tuple(result)


def divide_by_scalar(coefficients: Sequence[float], scalar: float, epsilon: float = EPSILON) -> Optional[Coefficients]:
    """Divides every coefficient by `scalar`; returns None when it is zero within `epsilon`."""
    if abs(scalar) < epsilon:
        return None
    return tuple(c / scalar for c in coefficients)


def power(coefficients: Sequence[float], exponent: int, max_exponent: int = MAX_EXPONENT) -> Coefficients:
    """Raises a polynomial to a small non-negative integer power by repeated multiplication.

    Raises:
        PolynomialSemanticError: If `exponent` is outside `[0, max_exponent]`.
    """
    if exponent < 0 or exponent > max_exponent:
        raise PolynomialSemanticError(
            "Exponent {} is outside the supported range [0, {}]".format(exponent, max_exponent)
        )
    if exponent == 0:
        return (1.0,)
    result = tuple(coefficients)
    for _ in range(exponent - 1):
        result = multiply(result, coefficients)
    return result
