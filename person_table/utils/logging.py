"""
Structured logging utilities for the person table application.

Centralizes logging configuration so the CLI, the session loop and the
registry log consistently. Uses standard library logging with a
human-readable formatter by default and an optional JSON formatter for
structured logs.

Usage:
    from person_table.utils.logging import configure_logging, get_logger

    configure_logging()  # LOG_LEVEL / LOG_JSON from settings
    log = get_logger(__name__)
    log.info("Person added", extra={"person_id": 6})
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict, Optional

from person_table.config import Settings, get_settings

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


def _json_formatter(record: logging.LogRecord) -> str:
    """Render a log record as JSON string."""
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    for key, value in vars(record).items():
        if key in _RESERVED_ATTRS or key.startswith("_"):
            continue
        payload[key] = value
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    """
    Build the `dictConfig` mapping for the given settings.

    One stderr handler on the root logger; `LOG_JSON` switches it to the
    JSON formatter and `LOG_LEVEL` sets the threshold for the whole app.
    """
    level = settings.log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": JsonFormatter,
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "json" if settings.log_json else "console",
                "stream": "ext://sys.stderr",
            }
        },
        "root": {
            "handlers": ["stderr"],
            "level": level,
        },
    }


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings (the cached ones by default)."""
    logging.config.dictConfig(build_logging_config(settings or get_settings()))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the given name. If name is None, returns the root logger.
    """
    return logging.getLogger(name)


__all__ = ["build_logging_config", "configure_logging", "get_logger", "JsonFormatter"]
