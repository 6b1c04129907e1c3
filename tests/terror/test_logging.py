"""Tests for logging configuration and error-object log emission."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest

from packages.terror import Capabilities, ErrorDecodeError, ErrorObject, create, decode
from packages.terror.config import LoggingSettings
from packages.terror.logging import (
    clear_context,
    configure_from_settings,
    configure_logging,
    error_context,
    get_context,
    get_logger,
    log_context,
    log_error_object,
)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Restore root handlers and bound context after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    clear_context()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_context()


def _conflict() -> ErrorObject:
    """Return an error with every capability field and one tag."""
    return (
        create(409, "failed to persist entity", capabilities=Capabilities.all())
        .with_error_code("entity.version_conflict")
        .add_tag("op:persist")
        .build()
    )


def test_log_error_object_writes_json_line_with_error_fields(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """JSON output should carry the display line and identifying fields."""
    configure_logging(level="DEBUG", json_output=True, service="billing")
    error = _conflict()

    log_error_object(get_logger("terror.test"), error)

    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["message"] == "[op:persist] (409) :: failed to persist entity"
    assert payload["level"] == "ERROR"
    assert payload["error"] == {
        "status": 409,
        "error_code": "entity.version_conflict",
        "error_id": str(error.id),
        "tags": ["op:persist"],
    }
    assert payload["service"] == "billing"


def test_plain_output_appends_bound_context(capsys: pytest.CaptureFixture[str]) -> None:
    """Plain output should append bound context as key=value pairs."""
    configure_from_settings(LoggingSettings(level="INFO", json_output=False, service="svc"))

    with log_context({"request_id": "req-1"}):
        get_logger("terror.test").warning("handled")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert "WARNING terror.test handled" in line
    assert "request_id=req-1" in line
    assert "service=svc" in line


def test_error_context_binds_fields_only_within_block() -> None:
    """error_context should bind status/code/id and restore afterwards."""
    error = _conflict()

    with error_context(error):
        bound = get_context()

    assert bound["status"] == "409"
    assert bound["error_id"] == str(error.id)
    assert "status" not in get_context()


def test_log_error_object_respects_level(caplog: pytest.LogCaptureFixture) -> None:
    """The requested level should be used for the emitted record."""
    error = create(404, "missing", capabilities=Capabilities.none()).build()

    with caplog.at_level(logging.INFO, logger="terror.test"):
        log_error_object(get_logger("terror.test"), error, level=logging.INFO)

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.INFO, "(404) :: missing")
    ]


def test_plain_output_lists_error_fields_before_context(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Plain lines should render error fields in fixed order ahead of context."""
    configure_logging(level="INFO", json_output=False)
    error = _conflict()

    with log_context({"request_id": "req-1"}):
        log_error_object(get_logger("terror.test"), error)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert line.endswith(
        "[op:persist] (409) :: failed to persist entity"
        f" status=409 error_code=entity.version_conflict error_id={error.id}"
        " tags=op:persist request_id=req-1"
    )


def test_decode_error_propagates_through_error_context() -> None:
    """Package exceptions should pass unchanged through logging context blocks."""
    error = _conflict()

    with pytest.raises(ErrorDecodeError) as exc_info:
        with error_context(error), log_context({"request_id": "req-1"}):
            decode({"message": "no status"}, capabilities=Capabilities.none())

    assert exc_info.value.fields == ("status",)
    assert exc_info.value.__traceback__ is not None
