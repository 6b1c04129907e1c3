"""Stdout logging configuration for services that emit error objects.

Records go to a single stdout handler as newline-delimited JSON or as plain
text. Fields describing an error object (status, code, id, tags) are kept
apart from the rest of the bound context in both renderings.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from . import fields
from .context import bind_context, get_context

if TYPE_CHECKING:
    from packages.terror.config import LoggingSettings


class ContextFilter(logging.Filter):
    """Split bound context and record fields into error and general context."""

    def filter(self, record: logging.LogRecord) -> bool:
        merged: dict[str, Any] = {**get_context(), **getattr(record, "fields", {})}
        record.error = {key: merged.pop(key) for key in fields.ERROR_FIELDS if key in merged}
        record.context = merged
        return True


class JsonFormatter(logging.Formatter):
    """Emit one JSON object per record; error-object fields nest under ``error``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        error = getattr(record, "error", None)
        if error:
            payload[fields.ERROR] = error
        payload.update(getattr(record, "context", None) or {})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Single text line: the message, then error fields, then sorted context."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        error = getattr(record, "error", None) or {}
        context = getattr(record, "context", None) or {}
        pairs = [(key, error[key]) for key in fields.ERROR_FIELDS if key in error]
        pairs.extend(sorted(context.items()))
        line = super().format(record)
        if not pairs:
            return line
        return line + " " + " ".join(f"{key}={_plain(value)}" for key, value in pairs)


def _plain(value: object) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Install one stdout handler on the root logger.

    Existing root handlers are replaced, so repeated calls do not duplicate
    output.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)

    bind_context(**{fields.SERVICE: service, fields.ENVIRONMENT: environment})


def configure_from_settings(settings: LoggingSettings) -> None:
    """Apply ``configure_logging`` using a ``LoggingSettings`` subtree."""
    configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
