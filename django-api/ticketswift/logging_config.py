"""Structured logging configuration."""

import logging
from datetime import datetime, timezone
from typing import Any

from pythonjsonlogger.json import JsonFormatter

CONTEXT_FIELDS = ("user_id", "event_id", "booking_id", "action")


class TicketSwiftJsonFormatter(JsonFormatter):
    """JSON formatter that adds service info and booking context fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "ticketswift"

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_record[field] = getattr(record, field)


def build_logging_config(level: str = "INFO", json_output: bool = True) -> dict[str, Any]:
    """Return a ``LOGGING`` dictConfig for Django settings."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": TicketSwiftJsonFormatter,
                "fmt": "%(timestamp)s %(level)s %(name)s %(message)s",
            },
            "plain": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if json_output else "plain",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
        "loggers": {
            # Reduce noise from libraries
            "django.db.backends": {"level": "WARNING"},
            "httpx": {"level": "WARNING"},
        },
    }
