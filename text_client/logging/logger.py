"""
Structured JSON logging for text_client.

Records become single-line JSON objects. Structured fields are attached with
``log_fields(...)`` and emitted under ``"fields"``; secrets such as the API
key must never be passed in.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

_FIELDS_ATTR = "_text_client_fields"


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service = service_name

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }

        fields = getattr(record, _FIELDS_ATTR, None)
        if fields:
            entry["fields"] = fields

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def log_fields(**fields: Any) -> dict[str, Any]:
    """Build the ``extra=`` mapping for a structured log call."""
    return {_FIELDS_ATTR: fields}


def setup_logging(
    service_name: str = "text_client",
    level_name: str | None = None,
) -> logging.Logger:
    """
    Route the root logger to stdout as JSON.

    ``level_name`` wins over the LOG_LEVEL env var; unknown names fall back
    to INFO. Returns the logger named after the service.
    """
    level_name = (level_name or os.environ.get("LOG_LEVEL", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter(service_name))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # httpx logs every request at INFO
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger = logging.getLogger(service_name)
    logger.debug("Logging initialized", extra=log_fields(level=level_name))
    return logger
