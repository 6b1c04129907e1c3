"""Emit error objects as log lines."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import fields
from .context import error_fields

if TYPE_CHECKING:
    from packages.terror.object import ErrorObject


def log_error_object(
    logger: logging.Logger,
    error: ErrorObject,
    *,
    level: int = logging.ERROR,
) -> None:
    """Log the display line of ``error`` with its identifying fields attached."""
    record_fields: dict[str, object] = {
        key: value for key, value in error_fields(error).items() if value is not None
    }
    if error.id is not None:
        record_fields[fields.ERROR_ID] = str(error.id)
    if error.tags:
        record_fields[fields.TAGS] = list(error.tags)
    logger.log(level, "%s", error, extra={"fields": record_fields})
