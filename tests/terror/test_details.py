"""Tests for detail value classification and immutability."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from uuid import UUID

import pytest
from pydantic import BaseModel

from packages.terror import (
    BooleanDetail,
    DetailSerializationError,
    IntegerDetail,
    NullDetail,
    StructuredDetail,
    TextDetail,
    detail_from_document,
    detail_from_value,
    structured,
)
from packages.terror.details import INT64_MAX


class _Color(str, Enum):
    RED = "red"


class _Entity(BaseModel):
    id: int
    name: str
    seen_at: datetime


@pytest.mark.parametrize(
    ("document", "expected"),
    [
        ("server", TextDetail("server")),
        (922, IntegerDetail(922)),
        (False, BooleanDetail(False)),
        (None, NullDetail()),
    ],
)
def test_detail_from_document_maps_scalars_to_scalar_arms(document, expected) -> None:
    """Scalar documents should classify into their dedicated arms."""
    assert detail_from_document(document) == expected


def test_detail_from_document_keeps_large_integers_structured() -> None:
    """Integers outside the signed 64-bit range fall into the structured arm."""
    detail = detail_from_document(INT64_MAX + 1)

    assert isinstance(detail, StructuredDetail)
    assert detail.document == INT64_MAX + 1


def test_structured_equality_ignores_key_order() -> None:
    """Structured documents compare by content, not key order."""
    assert structured({"a": 1, "b": [1, 2]}) == structured({"b": [1, 2], "a": 1})
    assert hash(structured({"a": 1})) == hash(structured({"a": 1}))


def test_structured_document_is_a_fresh_copy() -> None:
    """Mutating a returned document must not alter the stored detail."""
    detail = structured({"items": [1, 2]})

    detail.document["items"].append(3)

    assert detail.document == {"items": [1, 2]}


def test_structured_normalizes_tuples_to_lists() -> None:
    """Tuples are arrays on the wire."""
    assert structured({"pair": (1, 2)}) == structured({"pair": [1, 2]})


def test_structured_rejects_non_string_keys() -> None:
    """Object keys must be strings."""
    with pytest.raises(DetailSerializationError) as exc_info:
        structured({1: "one"}, key="lookup")

    assert exc_info.value.key == "lookup"


def test_detail_from_value_serializes_pydantic_models() -> None:
    """Pydantic models should become structured documents."""
    entity = _Entity(id=94, name="server", seen_at=datetime(2026, 1, 1, tzinfo=UTC))

    detail = detail_from_value(entity, key="object")

    assert detail.to_document() == {
        "id": 94,
        "name": "server",
        "seen_at": "2026-01-01T00:00:00Z",
    }


def test_detail_from_value_converts_common_scalars() -> None:
    """UUIDs and enums should serialize to their text form."""
    ident = UUID("0b6d8f1e-4a0c-4f7e-9d7e-2a5d3c1b9e10")

    assert detail_from_value(ident) == TextDetail(str(ident))
    assert detail_from_value(_Color.RED) == TextDetail("red")


def test_integer_detail_rejects_bool() -> None:
    """Booleans are not integers for detail purposes."""
    with pytest.raises(TypeError):
        IntegerDetail(True)
