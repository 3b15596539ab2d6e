"""Curve records and presets consumed by the UI layers."""

from .presets import COLOR_OPTIONS, GRAPH_COLORS, PRESET_POLYNOMIALS, color_for_index
from .state import (
    CurveState,
    add_curve,
    apply_expression,
    build_curve,
    recolor,
    remove_curve,
    toggle_visibility,
    update_curve,
)

__all__ = [
    "COLOR_OPTIONS",
    "GRAPH_COLORS",
    "PRESET_POLYNOMIALS",
    "color_for_index",
    "CurveState",
    "build_curve",
    "add_curve",
    "apply_expression",
    "update_curve",
    "toggle_visibility",
    "recolor",
    "remove_curve",
]
