"""Polynomial tools: dictionary-result wrappers and curve plotting."""

from .calculator import (
    SanitizationError,
    analyze_polynomial,
    compile_polynomial,
    cross_check_expression,
    expand_with_sympy,
    sanitize_polynomial_text,
)
from .plotter import Viewport, axis_ticks, build_figure, plot_expression, render_curves, trace_segments

__all__ = [
    "compile_polynomial",
    "analyze_polynomial",
    "sanitize_polynomial_text",
    "SanitizationError",
    "expand_with_sympy",
    "cross_check_expression",
    "Viewport",
    "trace_segments",
    "axis_ticks",
    "build_figure",
    "render_curves",
    "plot_expression",
]
