"""Wire document encoding and decoding for error objects.

Encoding emits only present fields, in a fixed order, and never emits
``tags``. Decoding validates the document with a pydantic model and raises
``ErrorDecodeError`` listing every violated field instead of returning a
partially populated object.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Annotated, Any, Mapping
from uuid import UUID

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from .capabilities import Capabilities, resolve
from .details import detail_from_document, details_to_document
from .exceptions import DecodeProblem, DetailSerializationError, ErrorDecodeError, decode_error
from .logging import get_logger
from .object import ErrorObject
from .status import STATUS_MAX, STATUS_MIN

logger = get_logger(__name__)


class ErrorDocument(BaseModel):
    """Validated shape of a received error document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    status: Annotated[StrictInt, Field(ge=STATUS_MIN, le=STATUS_MAX)]
    message: StrictStr
    short_message: StrictStr | None = None
    error_code: StrictStr | None = None
    details: dict[str, JsonValue] = Field(default_factory=dict)
    reference: StrictStr | None = None
    timestamp: AwareDatetime | None = None
    id: UUID | None = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def _timestamp_is_text(cls, value: object) -> object:
        """Accept instants only as RFC 3339 strings."""
        if value is not None and not isinstance(value, str):
            raise ValueError("timestamp must be an RFC 3339 string")
        return value


def encode(error: ErrorObject, *, capabilities: Capabilities | None = None) -> dict[str, Any]:
    """Return the wire document for ``error``."""
    enabled = resolve(capabilities)
    document: dict[str, Any] = {"status": error.status, "message": error.message}
    if error.short_message is not None:
        document["short_message"] = error.short_message
    if error.error_code is not None:
        document["error_code"] = error.error_code
    if error.details:
        document["details"] = details_to_document(error.details)
    if enabled.reference and error.reference is not None:
        document["reference"] = error.reference
    if enabled.timestamp and error.timestamp is not None:
        document["timestamp"] = _format_instant(error.timestamp)
    if enabled.identifier and error.id is not None:
        document["id"] = str(error.id)
    return document


def decode(document: Mapping[str, Any], *, capabilities: Capabilities | None = None) -> ErrorObject:
    """Rebuild an ``ErrorObject`` from a received wire document."""
    enabled = resolve(capabilities)
    if not isinstance(document, Mapping):
        raise decode_error((DecodeProblem(field="<root>", expectation="expected an object"),))

    try:
        parsed = ErrorDocument.model_validate(dict(document))
    except ValidationError as exc:
        error = decode_error(_problems(exc))
        logger.debug("rejected error document: %s", error)
        raise error from exc

    try:
        details = {
            key: detail_from_document(value, key=key) for key, value in parsed.details.items()
        }
    except DetailSerializationError as exc:
        raise decode_error(
            (DecodeProblem(field=f"details.{exc.key}", expectation=exc.message),)
        ) from exc

    return ErrorObject(
        status=parsed.status,
        message=parsed.message,
        short_message=parsed.short_message,
        error_code=parsed.error_code,
        details=details,
        reference=parsed.reference if enabled.reference else None,
        timestamp=_as_utc(parsed.timestamp) if enabled.timestamp else None,
        id=parsed.id if enabled.identifier else None,
    )


def to_json(error: ErrorObject, *, capabilities: Capabilities | None = None) -> str:
    """Return the wire document for ``error`` as compact JSON text."""
    return json.dumps(
        encode(error, capabilities=capabilities),
        separators=(",", ":"),
        ensure_ascii=False,
    )


def from_json(text: str | bytes, *, capabilities: Capabilities | None = None) -> ErrorObject:
    """Decode an ``ErrorObject`` from JSON text."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise decode_error(
            (DecodeProblem(field="<root>", expectation=f"valid JSON ({exc.msg})"),)
        ) from exc
    except UnicodeDecodeError as exc:
        raise decode_error(
            (DecodeProblem(field="<root>", expectation=f"valid UTF-8 text ({exc.reason})"),)
        ) from exc
    return decode(document, capabilities=capabilities)


def _problems(exc: ValidationError) -> tuple[DecodeProblem, ...]:
    return tuple(
        DecodeProblem(
            field=".".join(str(part) for part in item["loc"]) or "<root>",
            expectation=item["msg"],
        )
        for item in exc.errors()
    )


def _format_instant(value: datetime) -> str:
    """Render an instant as RFC 3339 with a ``Z`` suffix."""
    return _as_utc(value).isoformat().replace("+00:00", "Z")


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
