"""JSON log lines for the compiler, the tools and the service."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import IO, Any, Dict, Optional

PACKAGE_LOGGER = "polycurve"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; fields passed as `extra={"extra": {...}}` are merged in."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        fields = getattr(record, "extra", None)
        if isinstance(fields, dict):
            # structured fields never overwrite the base keys
            payload.update({key: value for key, value in fields.items() if key not in payload})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> logging.Logger:
    """Installs a single JSON handler on the `polycurve` logger.

    Records from `polycurve.*` stop there, so host processes such as uvicorn
    or streamlit keep their own root handlers untouched.

    Args:
        level: Level name, case-insensitive.
        stream: Target stream; stderr when omitted.

    Returns:
        The configured package logger.
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())

    package = logging.getLogger(PACKAGE_LOGGER)
    package.handlers = [handler]
    package.setLevel(level.upper())
    package.propagate = False
    return package


def get_logger(name: str) -> logging.Logger:
    """Returns a logger nested under the package logger."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = "{}.{}".format(PACKAGE_LOGGER, name)
    return logging.getLogger(name)
