"""Structured JSON logging.

Loggers across the package attach context through ``extra=``; the JSON
formatter renders those fields next to the message.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "devnzo-tools"


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding timestamp, level and service name."""

    def add_fields(
        self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logging(level: str | None = None) -> None:
    """Install the JSON handler on the root logger (replacing existing handlers)."""
    root = logging.getLogger()
    root.setLevel(level or log_level())
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ServiceJsonFormatter("%(name)s %(message)s"))
    root.addHandler(handler)
