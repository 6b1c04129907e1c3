"""Public logging API for terror.

This package wraps Python's ``logging`` module with stdout defaults, context
propagation, and a helper that writes error objects as single log lines.
"""

from .config import (
    ContextFilter,
    JsonFormatter,
    PlainFormatter,
    configure_from_settings,
    configure_logging,
    get_logger,
)
from .context import bind_context, clear_context, error_context, get_context, log_context
from .emit import log_error_object

__all__ = [
    "ContextFilter",
    "JsonFormatter",
    "PlainFormatter",
    "bind_context",
    "clear_context",
    "configure_from_settings",
    "configure_logging",
    "error_context",
    "get_context",
    "get_logger",
    "log_context",
    "log_error_object",
]
