"""Named-curve records held by interactive callers."""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional, Tuple, TypedDict

from polycurve.engine import compile_expression, parse

from .presets import color_for_index


class CurveState(TypedDict, total=False):
    curve_id: str
    expression: str
    coefficients: Tuple[float, ...]
    color: str
    visible: bool
    valid: bool


def build_curve(expression: str, color: str, curve_id: Optional[str] = None, **compiler_options: Any) -> CurveState:
    """Creates a curve from an expression that must compile.

    Args:
        expression: Source text shown and edited by the user.
        color: Display color.
        curve_id: Optional identifier; a random hex id is generated when omitted.
        **compiler_options: Forwarded to `compile_expression`.

    Returns:
        Initialized `CurveState`.

    Raises:
        PolynomialError: If the expression is invalid.
    """
    coefficients = compile_expression(expression, **compiler_options)
    return CurveState(
        curve_id=curve_id or uuid.uuid4().hex,
        expression=expression,
        coefficients=coefficients,
        color=color,
        visible=True,
        valid=True,
    )


def add_curve(curves: List[CurveState], expression: str, **compiler_options: Any) -> List[CurveState]:
    """Returns a new list with a curve appended, colored by its position in the palette."""
    curve = build_curve(expression, color_for_index(len(curves)), **compiler_options)
    return list(curves) + [curve]


def apply_expression(curve: CurveState, expression: str, **compiler_options: Any) -> CurveState:
    """Updates the expression text, keeping the last accepted coefficients when it is invalid.

    Args:
        curve: Current curve record.
        expression: New text typed by the user.
        **compiler_options: Forwarded to `parse`.

    Returns:
        New `CurveState`; `valid` reports whether `expression` compiled.
    """
    coefficients = parse(expression, **compiler_options)
    updated: Dict[str, Any] = dict(curve)
    updated["expression"] = expression
    updated["valid"] = coefficients is not None
    if coefficients is not None:
        updated["coefficients"] = coefficients
    return CurveState(**updated)


def update_curve(curves: List[CurveState], curve_id: str, expression: str, **compiler_options: Any) -> List[CurveState]:
    return [
        apply_expression(curve, expression, **compiler_options) if curve.get("curve_id") == curve_id else curve
        for curve in curves
    ]


def toggle_visibility(curve: CurveState) -> CurveState:
    return CurveState(**dict(curve, visible=not curve.get("visible", True)))


def recolor(curve: CurveState, color: str) -> CurveState:
    return CurveState(**dict(curve, color=color))


def remove_curve(curves: List[CurveState], curve_id: str) -> List[CurveState]:
    return [curve for curve in curves if curve.get("curve_id") != curve_id]
