"""Immutable error object returned by the builder and the codec."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping
from uuid import UUID

from .details import DetailValue

MDN_STATUS_REF = "https://developer.mozilla.org/en-US/docs/Web/HTTP/Status"


def reference_for(status: int) -> str:
    """Return the MDN documentation URL for an HTTP status code."""
    return f"{MDN_STATUS_REF}/{status}"


@dataclass(frozen=True)
class ErrorObject:
    """Structured error suited to service responses and logs.

    ``reference``, ``timestamp`` and ``id`` are populated only when the
    matching capability is enabled. ``tags`` feed the display line only; they
    are never serialized and do not take part in equality.
    """

    status: int
    message: str
    short_message: str | None = None
    error_code: str | None = None
    details: Mapping[str, DetailValue] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    reference: str | None = None
    timestamp: datetime | None = None
    id: UUID | None = None
    tags: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))

    def __reduce__(self) -> tuple[type[ErrorObject], tuple[object, ...]]:
        return (
            type(self),
            (
                self.status,
                self.message,
                self.short_message,
                self.error_code,
                dict(self.details),
                self.reference,
                self.timestamp,
                self.id,
                self.tags,
            ),
        )

    def __str__(self) -> str:
        from .formatting import format_error

        return format_error(self)
