"""Detail values storable in an error object's ``details`` mapping.

A detail is one of five closed arms: text, integer, boolean, null, or a
structured JSON-compatible document. Classification of a wire value into an
arm is canonical (see ``detail_from_document``), so a decoded detail always
compares equal to the detail that was encoded.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Mapping, Union

from pydantic_core import PydanticSerializationError, to_jsonable_python

from .exceptions import DetailSerializationError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True, slots=True)
class TextDetail:
    """Text detail value."""

    value: str

    def to_document(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class IntegerDetail:
    """Signed 64-bit integer detail value."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("IntegerDetail requires an int value")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"integer detail {self.value} is outside the signed 64-bit range")

    def to_document(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class BooleanDetail:
    """Boolean detail value."""

    value: bool

    def to_document(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class NullDetail:
    """Explicit null detail value."""

    def to_document(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class StructuredDetail:
    """Arbitrary JSON-compatible document stored under one detail key.

    The document is held as canonical JSON text so the detail stays immutable
    and hashable; ``document`` returns a fresh copy on each access.
    """

    canonical: str

    @property
    def document(self) -> Any:
        """Return a fresh copy of the stored document."""
        return json.loads(self.canonical)

    def to_document(self) -> Any:
        return self.document


DetailValue = Union[TextDetail, IntegerDetail, BooleanDetail, NullDetail, StructuredDetail]


def structured(document: Any, *, key: str = "") -> StructuredDetail:
    """Build a ``StructuredDetail`` from a JSON-compatible document."""
    normalized = normalize_document(document, key=key)
    return StructuredDetail(canonical=_canonical_json(normalized))


def detail_from_document(document: Any, *, key: str = "") -> DetailValue:
    """Classify one JSON-compatible value into its detail arm.

    Strings, booleans, 64-bit integers and null map onto their scalar arms;
    everything else is stored as a structured document.
    """
    if isinstance(document, str):
        return TextDetail(document)
    if isinstance(document, bool):
        return BooleanDetail(document)
    if isinstance(document, int) and INT64_MIN <= document <= INT64_MAX:
        return IntegerDetail(document)
    if document is None:
        return NullDetail()
    return structured(document, key=key)


def detail_from_value(value: Any, *, key: str = "") -> DetailValue:
    """Serialize an arbitrary Python value into a detail.

    Pydantic models, dataclasses, mappings, sequences, datetimes, UUIDs and
    enums are supported. Values without a structured encoding raise
    ``DetailSerializationError``.
    """
    try:
        document = to_jsonable_python(value)
    except PydanticSerializationError as exc:
        raise DetailSerializationError(
            message=f"detail {key!r} cannot be serialized: {exc}",
            key=key,
        ) from exc
    return detail_from_document(document, key=key)


def details_to_document(details: Mapping[str, DetailValue]) -> dict[str, Any]:
    """Render a details mapping as a plain wire object."""
    return {key: value.to_document() for key, value in details.items()}


def normalize_document(value: Any, *, key: str = "") -> Any:
    """Return ``value`` as plain JSON-compatible data, or raise.

    Tuples become lists; mapping keys must be strings and floats finite.
    """
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise _unserializable(key, f"non-finite number {value!r}")
        return value
    if isinstance(value, Mapping):
        output: dict[str, Any] = {}
        for name, item in value.items():
            if not isinstance(name, str):
                raise _unserializable(key, f"object key {name!r} is not a string")
            output[name] = normalize_document(item, key=key)
        return output
    if isinstance(value, (list, tuple)):
        return [normalize_document(item, key=key) for item in value]
    raise _unserializable(key, f"unsupported type {type(value).__name__}")


def _canonical_json(document: Any) -> str:
    return json.dumps(document, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _unserializable(key: str, reason: str) -> DetailSerializationError:
    return DetailSerializationError(
        message=f"detail {key!r} is not a valid document: {reason}",
        key=key,
    )
