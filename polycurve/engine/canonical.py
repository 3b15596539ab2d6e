"""Canonical form and tolerance-aware comparison of coefficient vectors."""

from __future__ import annotations

from itertools import zip_longest
from typing import Sequence, Tuple

EPSILON = 1e-10

Coefficients = Tuple[float, ...]

ZERO: Coefficients = (0.0,)


def canonicalize(coefficients: Sequence[float], epsilon: float = EPSILON) -> Coefficients:
    """Drops trailing near-zero coefficients, keeping at least one entry.

    Args:
        coefficients: Raw coefficient vector in ascending power order.
        epsilon: Magnitude below which a trailing coefficient is dropped.

    Returns:
        Canonical coefficient tuple; `(0.0,)` for the zero polynomial.
    """
    end = len(coefficients)
    while end > 1 and abs(coefficients[end - 1]) < epsilon:
        end -= 1
    if end == 0:
        return ZERO
    return tuple(float(c) for c in coefficients[:end])


def coefficients_equal(left: Sequence[float], right: Sequence[float], epsilon: float = EPSILON) -> bool:
    """Compares two vectors coefficient-wise within `epsilon`, padding with zeros."""
    return all(abs(a - b) <= epsilon for a, b in zip_longest(left, right, fillvalue=0.0))
