"""Exception normalization into error-object builders."""

from __future__ import annotations

from . import status
from .builder import ErrorBuilder, create
from .capabilities import Capabilities

EXCEPTION_TYPE_DETAIL = "exception_type"

# Checked in order; the first matching base class wins.
_STATUS_BY_EXCEPTION: tuple[tuple[type[BaseException], int, str], ...] = (
    (PermissionError, status.FORBIDDEN, "permission denied"),
    (TimeoutError, status.GATEWAY_TIMEOUT, "dependency timeout"),
    (ConnectionError, status.SERVICE_UNAVAILABLE, "dependency unavailable"),
    (NotImplementedError, status.NOT_IMPLEMENTED, "not implemented"),
    (KeyError, status.NOT_FOUND, "resource not found"),
    (ValueError, status.BAD_REQUEST, "invalid argument"),
)


def exception_to_builder(
    exc: BaseException,
    *,
    capabilities: Capabilities | None = None,
) -> ErrorBuilder:
    """Start a builder whose status reflects the kind of ``exc``.

    The mapping is generic and conservative; services can match their own
    exception types first and fall back to this function. Unrecognized
    exceptions map to ``500``.
    """
    code, fallback = status.INTERNAL_SERVER_ERROR, "unexpected exception"
    for exc_type, mapped, mapped_fallback in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            code, fallback = mapped, mapped_fallback
            break

    return create(code, str(exc) or fallback, capabilities=capabilities).add_text_detail(
        EXCEPTION_TYPE_DETAIL, type(exc).__name__
    )
