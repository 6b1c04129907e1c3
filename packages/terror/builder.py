"""Consuming builder for ``ErrorObject`` values.

Every configuration call consumes the receiving builder and returns a new
one; a consumed builder raises ``BuilderConsumedError`` on any further use.
``build()`` is the terminal call::

    error = (
        create(409, "failed to persist entity due to version conflict")
        .with_error_code("entity.version_conflict")
        .add_int_detail("entity_id", 922)
        .build()
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from .capabilities import Capabilities, Capability, resolve
from .details import (
    BooleanDetail,
    DetailValue,
    IntegerDetail,
    NullDetail,
    TextDetail,
    detail_from_document,
    detail_from_value,
)
from .exceptions import BuilderConsumedError, DetailSerializationError
from .logging import get_logger
from .object import ErrorObject, reference_for
from .status import INTERNAL_SERVER_ERROR, STATUS_MAX, STATUS_MIN

logger = get_logger(__name__)


@dataclass(frozen=True)
class _BuilderState:
    capabilities: Capabilities
    status: int
    message: str
    short_message: str | None = None
    error_code: str | None = None
    details: dict[str, DetailValue] = field(default_factory=dict)
    reference: str | None = None
    timestamp: datetime | None = None
    id: UUID | None = None
    tags: tuple[str, ...] = ()


class ErrorBuilder:
    """Single-use assembler for one ``ErrorObject``."""

    __slots__ = ("_state", "_consumed")

    def __init__(self, state: _BuilderState) -> None:
        self._state = state
        self._consumed = False

    @property
    def consumed(self) -> bool:
        """Return ``True`` once this builder value has been used."""
        return self._consumed

    def with_short_message(self, text: str) -> ErrorBuilder:
        """Set the abbreviated message, replacing any earlier one."""
        return self._advance(short_message=str(text))

    def with_error_code(self, code: str) -> ErrorBuilder:
        """Set the machine-readable error code, replacing any earlier one."""
        return self._advance(error_code=str(code))

    def add_text_detail(self, key: str, text: str) -> ErrorBuilder:
        return self._put(key, TextDetail(str(text)))

    def add_int_detail(self, key: str, value: int) -> ErrorBuilder:
        state = self._take()
        try:
            detail = IntegerDetail(value)
        except (TypeError, ValueError) as exc:
            raise DetailSerializationError(
                message=f"detail {key!r} is not a signed 64-bit integer: {value!r}",
                key=key,
            ) from exc
        return ErrorBuilder(_with_detail(state, key, detail))

    def add_bool_detail(self, key: str, flag: bool) -> ErrorBuilder:
        return self._put(key, BooleanDetail(bool(flag)))

    def add_null_detail(self, key: str) -> ErrorBuilder:
        return self._put(key, NullDetail())

    def add_structured_detail(self, key: str, document: Any) -> ErrorBuilder:
        """Store a JSON-compatible document under ``key``.

        Scalar documents are stored in their scalar arm, so the detail reads
        back identically after a wire round trip.
        """
        state = self._take()
        detail = detail_from_document(document, key=key)
        return ErrorBuilder(_with_detail(state, key, detail))

    def add_struct_from_value(self, key: str, value: Any) -> ErrorBuilder:
        """Serialize ``value`` into a document and store it under ``key``.

        Raises ``DetailSerializationError`` when ``value`` has no structured
        encoding; the chain is aborted and no error object is produced.
        """
        state = self._take()
        try:
            detail = detail_from_value(value, key=key)
        except DetailSerializationError:
            logger.warning(
                "structured detail %r could not be serialized (type %s)",
                key,
                type(value).__name__,
            )
            raise
        return ErrorBuilder(_with_detail(state, key, detail))

    def with_reference(self) -> ErrorBuilder:
        """Attach the MDN documentation URL for the current status."""
        state = self._take()
        state.capabilities.require(Capability.REFERENCE)
        return ErrorBuilder(replace(state, reference=reference_for(state.status)))

    def add_tag(self, tag: str) -> ErrorBuilder:
        """Append a log tag shown in the display line."""
        state = self._take()
        state.capabilities.require(Capability.TAGS)
        return ErrorBuilder(replace(state, tags=(*state.tags, str(tag))))

    def build(self) -> ErrorObject:
        """Consume the builder and return the finished error object."""
        state = self._take()
        return ErrorObject(
            status=state.status,
            message=state.message,
            short_message=state.short_message,
            error_code=state.error_code,
            details=dict(state.details),
            reference=state.reference,
            timestamp=state.timestamp,
            id=state.id,
            tags=state.tags,
        )

    def _take(self) -> _BuilderState:
        if self._consumed:
            raise BuilderConsumedError(message="builder has already been consumed")
        self._consumed = True
        return self._state

    def _advance(self, **changes: Any) -> ErrorBuilder:
        return ErrorBuilder(replace(self._take(), **changes))

    def _put(self, key: str, detail: DetailValue) -> ErrorBuilder:
        return ErrorBuilder(_with_detail(self._take(), key, detail))


def create(
    status: int,
    message: Any,
    *,
    capabilities: Capabilities | None = None,
) -> ErrorBuilder:
    """Start a builder for ``status`` and ``message``.

    ``status`` must be an unsigned 16-bit integer; HTTP ranges are not
    checked. Timestamp and identifier are captured here, not at ``build()``,
    when their capabilities are enabled.
    """
    _check_status(status)
    resolved = resolve(capabilities)
    return ErrorBuilder(
        _BuilderState(
            capabilities=resolved,
            status=status,
            message=str(message),
            timestamp=datetime.now(UTC) if resolved.timestamp else None,
            id=uuid4() if resolved.identifier else None,
        )
    )


def from_error(
    error: BaseException,
    *,
    capabilities: Capabilities | None = None,
) -> ErrorBuilder:
    """Start a ``500`` builder whose message is ``str(error)``."""
    return create(INTERNAL_SERVER_ERROR, str(error), capabilities=capabilities)


def _check_status(status: object) -> None:
    if isinstance(status, bool) or not isinstance(status, int):
        raise TypeError(f"status must be an int, got {type(status).__name__}")
    if not STATUS_MIN <= status <= STATUS_MAX:
        raise ValueError(f"status {status} is outside {STATUS_MIN}..{STATUS_MAX}")


def _with_detail(state: _BuilderState, key: str, detail: DetailValue) -> _BuilderState:
    return replace(state, details={**state.details, str(key): detail})
