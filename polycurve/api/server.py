"""REST interface exposing the polynomial compiler and curve tracing."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from polycurve.engine import (
    PolynomialError,
    compile_expression,
    degree,
    derivative,
    evaluate_at,
    format_polynomial,
    integral,
    roots,
)
from polycurve.tools.plotter import Viewport, trace_segments
from polycurve.utils.config_loader import PolycurveConfig
from polycurve.utils.logger import get_logger

logger = get_logger("polycurve.api")


class ParseRequest(BaseModel):
    expression: str = Field(default="", description="Polynomial expression in x")


class ParseResponse(BaseModel):
    expression: str
    coefficients: List[float]
    degree: int
    formatted: str


class EvaluateRequest(BaseModel):
    coefficients: List[float] = Field(default_factory=lambda: [0.0], description="Ascending coefficients")
    xs: List[float] = Field(default_factory=list, description="Points to evaluate at")


class EvaluateResponse(BaseModel):
    ys: List[Optional[float]]


class AnalyzeRequest(BaseModel):
    coefficients: List[float] = Field(default_factory=lambda: [0.0], description="Ascending coefficients")
    integral_constant: float = Field(default=0.0, description="Constant term of the antiderivative")


class AnalyzeResponse(BaseModel):
    degree: int
    formatted: str
    derivative: List[float]
    integral: List[float]
    roots: List[float]


class TraceRequest(BaseModel):
    coefficients: List[float] = Field(default_factory=lambda: [0.0])
    width: int = Field(default=800, gt=0, le=10000)
    height: int = Field(default=600, gt=0, le=10000)
    zoom: float = Field(default=1.0, gt=0)
    pan_x: float = Field(default=0.0)
    pan_y: float = Field(default=0.0)


class TraceResponse(BaseModel):
    segments: List[List[List[float]]]


def create_app(config: Optional[PolycurveConfig] = None) -> Any:
    """Builds the FastAPI application.

    Args:
        config: Settings for tolerances, limits and plotting; defaults apply when omitted.

    Returns:
        Configured FastAPI instance.
    """
    settings = config or PolycurveConfig()
    epsilon = settings.precision.epsilon
    decimals = settings.precision.format_decimals

    app = FastAPI(title="polycurve", version=settings.version)

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/v1/parse", response_model=ParseResponse)
    async def parse_expression(payload: ParseRequest) -> Dict[str, Any]:
        try:
            coefficients = compile_expression(payload.expression, **settings.compiler_options())
        except PolynomialError as exc:
            logger.info("Rejected expression", extra={"extra": {"kind": exc.kind}})
            raise HTTPException(
                status_code=422,
                detail={"error": str(exc), "kind": exc.kind, "position": exc.position},
            ) from exc
        return {
            "expression": payload.expression,
            "coefficients": list(coefficients),
            "degree": degree(coefficients, epsilon),
            "formatted": format_polynomial(coefficients, decimals, epsilon),
        }

    @app.post("/v1/evaluate", response_model=EvaluateResponse)
    async def evaluate(payload: EvaluateRequest) -> Dict[str, Any]:
        ys = [evaluate_at(payload.coefficients, x) for x in payload.xs]
        return {"ys": [y if math.isfinite(y) else None for y in ys]}

    @app.post("/v1/analyze", response_model=AnalyzeResponse)
    async def analyze(payload: AnalyzeRequest) -> Dict[str, Any]:
        coefficients = payload.coefficients or [0.0]
        return {
            "degree": degree(coefficients, epsilon),
            "formatted": format_polynomial(coefficients, decimals, epsilon),
            "derivative": list(derivative(coefficients, epsilon)),
            "integral": list(integral(coefficients, payload.integral_constant, epsilon)),
            "roots": roots(coefficients, epsilon),
        }

    @app.post("/v1/trace", response_model=TraceResponse)
    async def trace(payload: TraceRequest) -> Dict[str, Any]:
        viewport = Viewport(
            width=payload.width,
            height=payload.height,
            zoom=payload.zoom,
            pan_x=payload.pan_x,
            pan_y=payload.pan_y,
            base_scale=settings.plot.base_scale,
        )
        segments = trace_segments(payload.coefficients, viewport, settings.plot.margin)
        return {"segments": [[[px, py] for px, py in segment] for segment in segments]}

    return app
