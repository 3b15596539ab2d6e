"""Pixel-space tracing and matplotlib rendering of polynomial curves."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import matplotlib.pyplot as plt

from polycurve.curves.state import CurveState
from polycurve.engine import PolynomialError, compile_expression, evaluate_at
from polycurve.utils.logger import get_logger

MIN_ZOOM = 0.2
MAX_ZOOM = 5.0
ZOOM_STEP = 1.2
DEFAULT_MARGIN = 1000.0

Segment = List[Tuple[float, float]]

logger = get_logger("polycurve.plotter")


@dataclass(frozen=True)
class Viewport:
    """Affine map between pixel space and math space.

    The math origin sits at the canvas centre shifted by the pan offsets;
    one math unit spans `base_scale * zoom` pixels and the y-axis points up.
    """

    width: int = 800
    height: int = 600
    zoom: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0
    base_scale: float = 50.0

    @property
    def scale(self) -> float:
        return self.base_scale * self.zoom

    @property
    def center_x(self) -> float:
        return self.width / 2.0 + self.pan_x

    @property
    def center_y(self) -> float:
        return self.height / 2.0 + self.pan_y

    def to_math_x(self, px: float) -> float:
        return (px - self.center_x) / self.scale

    def to_pixel_x(self, x: float) -> float:
        return self.center_x + x * self.scale

    def to_pixel_y(self, y: float) -> float:
        return self.center_y - y * self.scale

    def zoomed_in(self, factor: float = ZOOM_STEP) -> "Viewport":
        return replace(self, zoom=min(self.zoom * factor, MAX_ZOOM))

    def zoomed_out(self, factor: float = ZOOM_STEP) -> "Viewport":
        return replace(self, zoom=max(self.zoom / factor, MIN_ZOOM))

    def panned(self, delta_x: float, delta_y: float) -> "Viewport":
        return replace(self, pan_x=self.pan_x + delta_x, pan_y=self.pan_y + delta_y)

    def reset(self) -> "Viewport":
        return replace(self, zoom=1.0, pan_x=0.0, pan_y=0.0)


def trace_segments(coefficients: Sequence[float], viewport: Viewport, margin: float = DEFAULT_MARGIN) -> List[Segment]:
    """Samples the curve once per pixel column and splits it into polylines.

    A non-finite value, or a pixel row further than `margin` pixels outside
    the canvas, ends the current polyline instead of joining across it.

    Returns:
        List of segments, each a list of `(px, py)` pixel coordinates.
    """
    segments: List[Segment] = []
    current: Segment = []
    for px in range(int(viewport.width)):
        y = evaluate_at(coefficients, viewport.to_math_x(px))
        py = viewport.to_pixel_y(y) if math.isfinite(y) else math.nan
        if not math.isfinite(py) or py < -margin or py > viewport.height + margin:
            if current:
                segments.append(current)
                current = []
            continue
        current.append((float(px), py))
    if current:
        segments.append(current)
    return segments


def _grid_lines(start: float, limit: float, spacing: float) -> Iterable[float]:
    position = start % spacing
    while position < limit:
        yield position
        position += spacing


def axis_ticks(viewport: Viewport) -> Tuple[List[Tuple[int, float]], List[Tuple[int, float]]]:
    """Integer tick labels visible on each axis, skipping the origin.

    Returns:
        `(x_ticks, y_ticks)`, each a list of `(value, pixel_position)`.
    """
    scale = viewport.scale
    x_first = math.floor(-viewport.center_x / scale)
    x_last = math.ceil((viewport.width - viewport.center_x) / scale)
    y_first = math.floor(-viewport.center_y / scale)
    y_last = math.ceil((viewport.height - viewport.center_y) / scale)
    x_ticks = [(i, viewport.to_pixel_x(i)) for i in range(x_first, x_last + 1) if i != 0]
    y_ticks = [(i, viewport.to_pixel_y(i)) for i in range(y_first, y_last + 1) if i != 0]
    return x_ticks, y_ticks


def build_figure(curves: Sequence[CurveState], viewport: Viewport, margin: float = DEFAULT_MARGIN, dpi: int = 100) -> Any:
    """Draws grid, axes with integer labels and every visible curve in pixel coordinates."""
    fig, ax = plt.subplots(figsize=(viewport.width / float(dpi), viewport.height / float(dpi)), dpi=dpi)
    ax.set_xlim(0, viewport.width)
    ax.set_ylim(viewport.height, 0)
    ax.set_axis_off()
    fig.subplots_adjust(left=0, right=1, top=1, bottom=0)

    for x in _grid_lines(viewport.center_x, viewport.width, viewport.scale):
        ax.axvline(x, color="black", alpha=0.06, linewidth=1)
    for y in _grid_lines(viewport.center_y, viewport.height, viewport.scale):
        ax.axhline(y, color="black", alpha=0.06, linewidth=1)
    ax.axhline(viewport.center_y, color="black", alpha=0.25, linewidth=1)
    ax.axvline(viewport.center_x, color="black", alpha=0.25, linewidth=1)

    x_ticks, y_ticks = axis_ticks(viewport)
    for value, px in x_ticks:
        ax.text(px, viewport.center_y + 16, str(value), ha="center", fontsize=8, color="#666666")
    for value, py in y_ticks:
        ax.text(viewport.center_x - 8, py + 4, str(value), ha="right", fontsize=8, color="#666666")

    for curve in curves:
        if not curve.get("visible", True) or not curve.get("coefficients"):
            continue
        for segment in trace_segments(curve["coefficients"], viewport, margin):
            xs, ys = zip(*segment)
            ax.plot(xs, ys, color=curve.get("color", "#000000"), linewidth=2.0, solid_capstyle="round")
    return fig


def render_curves(
    curves: Sequence[CurveState],
    output_path: str,
    viewport: Viewport = Viewport(),
    margin: float = DEFAULT_MARGIN,
    dpi: int = 100,
) -> Dict[str, Any]:
    try:
        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)
        fig = build_figure(curves, viewport, margin=margin, dpi=dpi)
        fig.savefig(output, dpi=dpi)
        plt.close(fig)
    except (OSError, ValueError) as exc:
        return {"ok": False, "error": str(exc), "method": "render_curves", "metadata": {}}

    visible = sum(1 for curve in curves if curve.get("visible", True))
    logger.info("Rendered %d curve(s) to %s", visible, output)
    return {"ok": True, "result": str(output), "method": "matplotlib", "metadata": {"curves": visible}}


def plot_expression(
    expression: str,
    output_path: str,
    viewport: Viewport = Viewport(),
    color: str = "#2563eb",
    margin: float = DEFAULT_MARGIN,
    dpi: int = 100,
    **compiler_options: Any,
) -> Dict[str, Any]:
    try:
        coefficients = compile_expression(expression, **compiler_options)
    except PolynomialError as exc:
        return {
            "ok": False,
            "error": str(exc),
            "method": "plot_expression",
            "metadata": {"expression": expression, "kind": exc.kind},
        }

    curve = CurveState(
        curve_id="plot",
        expression=expression,
        coefficients=coefficients,
        color=color,
        visible=True,
        valid=True,
    )
    return render_curves([curve], output_path, viewport=viewport, margin=margin, dpi=dpi)
