"""CLI/API entrypoint for polycurve."""

from __future__ import annotations

import argparse
import json
from typing import List, Optional, Sequence

from polycurve.curves import PRESET_POLYNOMIALS
from polycurve.tools.calculator import analyze_polynomial, cross_check_expression
from polycurve.tools.plotter import Viewport, plot_expression
from polycurve.utils.config_loader import PolycurveConfig, load_config
from polycurve.utils.logger import configure_logging, get_logger

logger = get_logger("polycurve.cli")


def build_parser() -> argparse.ArgumentParser:
    """Builds CLI argument parser for app entrypoints.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="polycurve", description="Single-variable polynomial compiler")
    parser.add_argument("expression", nargs="?", default="", help="Expression in x, e.g. '(x+1)^2 - 3x'")
    parser.add_argument("--mode", choices=["cli", "api"], default="cli")
    parser.add_argument("--at", type=float, action="append", default=[], help="Evaluate at this x (repeatable)")
    parser.add_argument("--integral-constant", type=float, default=0.0)
    parser.add_argument("--plot", type=str, default=None, help="Write a PNG of the curve to this path")
    parser.add_argument("--zoom", type=float, default=None)
    parser.add_argument("--cross-check", action="store_true", help="Compare the expansion against SymPy")
    parser.add_argument("--presets", action="store_true", help="List example expressions and exit")
    parser.add_argument("--config", type=str, default=None, help="YAML settings file")
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--log-level", type=str, default=None)
    return parser


def run_cli(
    expression: str,
    config: PolycurveConfig,
    points: Sequence[float] = (),
    integral_constant: float = 0.0,
    plot_path: Optional[str] = None,
    zoom: Optional[float] = None,
    cross_check: bool = False,
) -> int:
    """Compiles one expression and prints a JSON report.

    Args:
        expression: Expression text.
        config: Loaded settings.
        points: x values to evaluate at.
        integral_constant: Constant term of the reported antiderivative.
        plot_path: Optional PNG output path.
        zoom: Optional zoom override for the plot.
        cross_check: Whether to compare against SymPy.

    Returns:
        Process exit code; 1 when the expression is invalid.

    Raises:
        ValueError: If no expression is provided.
    """
    if not expression:
        raise ValueError("an expression is required in cli mode unless --presets is used")

    analysis = analyze_polynomial(
        expression,
        points=points,
        integral_constant=integral_constant,
        epsilon=config.precision.epsilon,
        decimals=config.precision.format_decimals,
        max_exponent=config.limits.max_exponent,
        max_length=config.limits.max_expression_length,
    )
    report = {"expression": expression, "valid": analysis["ok"]}
    if not analysis["ok"]:
        report["error"] = analysis["error"]
        report["kind"] = analysis["metadata"].get("kind")
        logger.info("Invalid expression", extra={"extra": {"kind": report["kind"]}})
        print(json.dumps(report, ensure_ascii=True, indent=2))
        return 1

    report.update(analysis["result"])

    if cross_check:
        check = cross_check_expression(expression, epsilon=config.precision.epsilon)
        report["cross_check"] = check["result"] if check["ok"] else check["error"]

    if plot_path:
        viewport = Viewport(
            width=config.plot.width,
            height=config.plot.height,
            zoom=zoom if zoom is not None else config.plot.zoom,
            base_scale=config.plot.base_scale,
        )
        plotted = plot_expression(
            expression,
            plot_path,
            viewport=viewport,
            margin=config.plot.margin,
            dpi=config.plot.dpi,
            **config.compiler_options(),
        )
        report["plot"] = plotted["result"] if plotted["ok"] else plotted["error"]

    print(json.dumps(report, ensure_ascii=True, indent=2))
    return 0


def run_presets() -> int:
    print(json.dumps(PRESET_POLYNOMIALS, ensure_ascii=True, indent=2))
    return 0


def run_api(config: PolycurveConfig, host: str, port: int) -> int:
    """Runs the FastAPI server using Uvicorn.

    Args:
        config: Loaded settings.
        host: Bind host.
        port: Bind port.

    Returns:
        Process exit code.
    """
    import uvicorn

    from polycurve.api import create_app

    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Application entrypoint for CLI and API modes.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config) if args.config else PolycurveConfig()
    configure_logging(args.log_level or str(config.logging.get("level", "INFO")))

    if args.presets:
        return run_presets()
    if args.mode == "api":
        return run_api(config, args.host, args.port)
    return run_cli(
        expression=args.expression,
        config=config,
        points=args.at,
        integral_constant=args.integral_constant,
        plot_path=args.plot,
        zoom=args.zoom,
        cross_check=args.cross_check,
    )


if __name__ == "__main__":
    raise SystemExit(main())
