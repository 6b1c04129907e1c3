"""Tests for error-object immutability, copying and pickling."""

from __future__ import annotations

import copy
import pickle
from types import MappingProxyType

import pytest

from packages.terror import Capabilities, ErrorObject, TextDetail, create


def _error() -> ErrorObject:
    """Return an error with details, capability fields and a tag."""
    return (
        create(404, "missing", capabilities=Capabilities.all())
        .with_error_code("entity.missing")
        .add_text_detail("entity", "account")
        .add_structured_detail("keys", {"id": [1, 2]})
        .with_reference()
        .add_tag("op:read")
        .build()
    )


def test_deepcopy_preserves_every_field() -> None:
    """deepcopy should produce an equal, independent object."""
    error = _error()

    copied = copy.deepcopy(error)

    assert copied == error
    assert copied.tags == error.tags
    assert copied.id == error.id
    assert copied.details is not error.details


def test_pickle_round_trip_preserves_every_field() -> None:
    """Error objects should survive pickling, e.g. for log queue handoff."""
    error = _error()

    restored = pickle.loads(pickle.dumps(error))

    assert restored == error
    assert restored.tags == ("op:read",)
    assert restored.timestamp == error.timestamp
    assert isinstance(restored.details, MappingProxyType)


def test_details_are_detached_from_caller_mapping() -> None:
    """Later changes to a caller's mapping must not leak into the object."""
    source = {"entity": TextDetail("account")}

    error = ErrorObject(status=404, message="missing", details=MappingProxyType(source))
    source["entity"] = TextDetail("changed")
    source["extra"] = TextDetail("x")

    assert dict(error.details) == {"entity": TextDetail("account")}


def test_details_cannot_be_mutated() -> None:
    """The details mapping is read-only."""
    error = _error()

    with pytest.raises(TypeError):
        error.details["entity"] = TextDetail("changed")  # type: ignore[index]
