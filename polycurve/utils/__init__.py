"""Utility helpers for polycurve."""

from .config_loader import ConfigError, PolycurveConfig, load_config
from .logger import configure_logging, get_logger

__all__ = [
    "ConfigError",
    "PolycurveConfig",
    "load_config",
    "configure_logging",
    "get_logger",
]
