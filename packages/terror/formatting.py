"""Single-line display rendering for error objects."""

from __future__ import annotations

from .object import ErrorObject


def format_error(error: ErrorObject) -> str:
    """Render ``error`` as ``[tags] (status) :: message``.

    The tag prefix is present only when tags were added. Content is emitted
    verbatim; control characters are not escaped.

    Example::

        [op:persist ctx:none] (409) :: failed to persist entity due to version conflict
    """
    prefix = f"[{' '.join(error.tags)}] " if error.tags else ""
    return f"{prefix}({error.status}) :: {error.message}"
