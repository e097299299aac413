"""Logging setup shared by the library and the CLI.

Logs go to stderr so the report written to stdout stays clean.
Environment: LOG_LEVEL (default WARNING), LOG_JSON ("true" for JSON lines).
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import os

_LOGGER_INITIALIZED = False


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": dt.datetime.fromtimestamp(record.created, dt.timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _build_logger() -> None:
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    level = os.getenv("LOG_LEVEL", "WARNING").upper()
    json_mode = os.getenv("LOG_JSON", "false").lower() == "true"

    logger = logging.getLogger("wordindex")
    logger.setLevel(getattr(logging, level, logging.WARNING))
    logger.propagate = False

    handler = logging.StreamHandler()
    handler.setLevel(logger.level)
    if json_mode:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(handler)

    _LOGGER_INITIALIZED = True


def get_logger(name: str | None = None) -> logging.Logger:
    _build_logger()
    return logging.getLogger(name if name else "wordindex")
