"""Numeric operations on finished coefficient vectors."""

from __future__ import annotations

import math
from typing import List, Sequence

from .canonical import EPSILON, ZERO, Coefficients, canonicalize


def evaluate_at(coefficients: Sequence[float], x: float) -> float:
    """Evaluates the polynomial at `x` with Horner's method.

    The result may be infinite or NaN for extreme inputs; callers decide how
    to treat it.
    """
    if not coefficients:
        return 0.0
    result = float(coefficients[-1])
    for i in range(len(coefficients) - 2, -1, -1):
        result = result * x + coefficients[i]
    return result


def degree(coefficients: Sequence[float], epsilon: float = EPSILON) -> int:
    for i in range(len(coefficients) - 1, -1, -1):
        if abs(coefficients[i]) > epsilon:
            return i
    return 0


def derivative(coefficients: Sequence[float], epsilon: float = EPSILON) -> Coefficients:
    if len(coefficients) <= 1:
        return ZERO
    return canonicalize([coefficients[i] * i for i in range(1, len(coefficients))], epsilon)


def integral(coefficients: Sequence[float], constant: float = 0.0, epsilon: float = EPSILON) -> Coefficients:
    """Antiderivative with `constant` as the zero-order coefficient."""
    result = [float(constant)]
    result.extend(c / (i + 1) for i, c in enumerate(coefficients))
    return canonicalize(result, epsilon)


def roots(coefficients: Sequence[float], epsilon: float = EPSILON) -> List[float]:
    """Real roots for degree 1 and 2 polynomials, in ascending order.

    Constant polynomials and degree 3 or higher return an empty list; no
    numerical approximation is attempted.
    """
    n = degree(coefficients, epsilon)
    if n == 1:
        b, a = coefficients[0], coefficients[1]
        return [-b / a]
    if n != 2:
        return []

    c, b, a = coefficients[0], coefficients[1], coefficients[2]
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return []
    root = math.sqrt(discriminant)
    first = (-b - root) / (2 * a)
    second = (-b + root) / (2 * a)
    if abs(first - second) < epsilon:
        return [first]
    return sorted([first, second])
