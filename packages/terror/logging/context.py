"""Structured logging context carried in a ``contextvars`` variable.

Bound fields are appended to every record emitted while they are in scope,
which lets one error object's identity follow any log lines written while it
is being handled.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator, Mapping

from . import fields

if TYPE_CHECKING:
    from packages.terror.object import ErrorObject

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar("terror_log_context", default={})


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound in the current context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind stringified values; ``None`` values are skipped."""
    bound = {str(key): str(value) for key, value in values.items() if value is not None}
    if bound:
        _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **bound})


def clear_context(*keys: str) -> None:
    """Drop the named keys, or every key when none are given."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    _LOG_CONTEXT.set({k: v for k, v in _LOG_CONTEXT.get().items() if k not in keys})


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of a block."""
    token = _LOG_CONTEXT.set(dict(_LOG_CONTEXT.get()))
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def error_fields(error: ErrorObject) -> dict[str, object]:
    """Return the structured log fields describing one error object."""
    return {
        fields.STATUS: error.status,
        fields.ERROR_CODE: error.error_code,
        fields.ERROR_ID: error.id,
    }


@contextmanager
def error_context(error: ErrorObject) -> Iterator[None]:
    """Bind an error object's status, code and id for a block."""
    with log_context(error_fields(error)):
        yield
