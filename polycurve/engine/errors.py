"""Error taxonomy for expression compilation."""

from __future__ import annotations

from typing import Optional


class PolynomialError(ValueError):
    """Base class for every failure raised while compiling an expression."""

    kind = "invalid"

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


class EmptyExpressionError(PolynomialError):
    """Raised when the expression is blank or whitespace-only."""

    kind = "empty_input"


class ExpressionSyntaxError(PolynomialError):
    """Raised when the normalized text does not match the grammar."""

    kind = "syntax"


class PolynomialSemanticError(PolynomialError):
    """Raised when a well-formed tree cannot be reduced to a polynomial."""

    kind = "semantic"
