"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line, extras included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    level: Optional[str] = None,
) -> None:
    """Configure the root logger.

    Args:
        config: Logging configuration (defaults to the app config).
        level: Optional level name overriding ``config.level``.
    """
    config = config or get_config().observability
    level_name = str(level or config.level).upper()

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        handlers=[handler],
        force=True,
    )
