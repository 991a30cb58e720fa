"""
Root logger setup for the parse-seed CLI.

Two output formats: a pipe-separated console line, or one JSON object per
record (`SEED_LOG_JSON=true`). In JSON mode, every field passed through
`extra=` becomes a top-level key, so `log.info("done", extra={"objects_created": 3})`
is emitted as `{"message": "done", "objects_created": 3, ...}`.
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict, Optional

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attribute names present on every LogRecord; the rest came in through `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


def _json_formatter(record: logging.LogRecord) -> str:
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    payload.update(
        (key, value)
        for key, value in vars(record).items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    )
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Install a single stderr handler on the root logger.

    Parameters
    ----------
    level : str
        Level name, case-insensitive (`SEED_LOG_LEVEL`).
    json_logs : bool
        Emit JSON objects instead of console lines (`SEED_LOG_JSON`).
    """
    level = level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {"format": _CONSOLE_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if json_logs else "console",
                    "level": level,
                }
            },
            "root": {"handlers": ["stderr"], "level": level},
        }
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "JsonFormatter"]
