"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from todokit.core import logging as logging_module
from todokit.core.logging import (
    add_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
    reset_request_context,
)


@pytest.fixture(autouse=True)
def _reset_logging():  # type: ignore[no-untyped-def]
    yield
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)
    clear_request_context()
    logging_module._configured = False
    structlog.reset_defaults()


def test_json_format_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON logs go to stderr with event, level and bound context."""
    configure_logging(level="INFO", fmt="json", force=True)
    add_request_context(request_id="r-1")

    get_logger("todokit.test").info("todo.created", todo_id=7)

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["event"] == "todo.created"
    assert record["todo_id"] == 7
    assert record["level"] == "info"
    assert record["request_id"] == "r-1"
    assert record["logger"] == "todokit.test"


def test_level_filters_lower_records(capsys: pytest.CaptureFixture[str]) -> None:
    """Records below the configured level are dropped."""
    configure_logging(level="WARNING", fmt="json", force=True)

    get_logger("todokit.test").info("hidden")
    get_logger("todokit.test").warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
    assert logging.getLogger().level == logging.WARNING


def test_configure_is_idempotent_without_force() -> None:
    """A second call does not replace handlers."""
    configure_logging(level="INFO", fmt="console", force=True)
    handlers = list(logging.getLogger().handlers)

    configure_logging(level="DEBUG")

    assert logging.getLogger().handlers == handlers
    assert logging.getLogger().level == logging.INFO


def test_request_context_helpers() -> None:
    """Context helpers bind, unbind and clear contextvars."""
    add_request_context(request_id="abc", method="GET")
    assert structlog.contextvars.get_contextvars() == {"request_id": "abc", "method": "GET"}

    reset_request_context("method")
    assert structlog.contextvars.get_contextvars() == {"request_id": "abc"}

    clear_request_context()
    assert structlog.contextvars.get_contextvars() == {}
