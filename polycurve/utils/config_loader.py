"""YAML-backed settings for the compiler, the plotter and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = "configs/polycurve.yml"


@dataclass
class PrecisionSettings:
    epsilon: float = 1e-10
    format_decimals: int = 4


@dataclass
class LimitSettings:
    max_exponent: int = 50
    max_expression_length: Optional[int] = None


@dataclass
class PlotSettings:
    width: int = 800
    height: int = 600
    base_scale: float = 50.0
    zoom: float = 1.0
    margin: float = 1000.0
    dpi: int = 100


@dataclass
class PolycurveConfig:
    version: str = "1.0.0"
    precision: PrecisionSettings = field(default_factory=PrecisionSettings)
    limits: LimitSettings = field(default_factory=LimitSettings)
    plot: PlotSettings = field(default_factory=PlotSettings)
    logging: Dict[str, Any] = field(default_factory=dict)

    def compiler_options(self) -> Dict[str, Any]:
        """Keyword arguments accepted by `parse` and `compile_expression`."""
        return {
            "epsilon": self.precision.epsilon,
            "max_exponent": self.limits.max_exponent,
            "max_length": self.limits.max_expression_length,
        }


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError("Configuration file not found: {}".format(path))
    with path.open("r", encoding="utf-8") as handle:
        try:
            loaded = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError("Invalid YAML in {}: {}".format(path, exc)) from exc
    if not isinstance(loaded, dict):
        raise ConfigError("Configuration root must be a mapping in {}".format(path))
    return loaded


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name, {}) or {}
    if not isinstance(section, dict):
        raise ConfigError("'{}' must be a mapping".format(name))
    return section


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def load_config(path: str = DEFAULT_CONFIG_PATH) -> PolycurveConfig:
    data = _load_yaml(Path(path))
    precision_data = _section(data, "precision")
    limits_data = _section(data, "limits")
    plot_data = _section(data, "plot")

    try:
        precision = PrecisionSettings(
            epsilon=float(precision_data.get("epsilon", 1e-10)),
            format_decimals=int(precision_data.get("format_decimals", 4)),
        )
        limits = LimitSettings(
            max_exponent=int(limits_data.get("max_exponent", 50)),
            max_expression_length=_optional_int(limits_data.get("max_expression_length")),
        )
        plot = PlotSettings(
            width=int(plot_data.get("width", 800)),
            height=int(plot_data.get("height", 600)),
            base_scale=float(plot_data.get("base_scale", 50.0)),
            zoom=float(plot_data.get("zoom", 1.0)),
            margin=float(plot_data.get("margin", 1000.0)),
            dpi=int(plot_data.get("dpi", 100)),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError("Invalid value in {}: {}".format(path, exc)) from exc

    if precision.epsilon <= 0:
        raise ConfigError("precision.epsilon must be positive")
    if limits.max_exponent < 0:
        raise ConfigError("limits.max_exponent must be non-negative")
    if limits.max_expression_length is not None and limits.max_expression_length <= 0:
        raise ConfigError("limits.max_expression_length must be positive when set")

    return PolycurveConfig(
        version=str(data.get("version", "1.0.0")),
        precision=precision,
        limits=limits,
        plot=plot,
        logging=dict(_section(data, "logging")),
    )
