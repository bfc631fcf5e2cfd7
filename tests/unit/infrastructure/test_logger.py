# tests/unit/infrastructure/test_logger.py
from __future__ import annotations

import json
import logging
import sys
from collections.abc import Generator

import pytest

from modelentities.infrastructure.logging.logger import (
    _JsonFormatter,  # internal but importable
    configure_root_logging,
    get_json_logger,
)


def _render(msg: str, level: int = logging.INFO, exc_info=None, **attrs) -> dict:
    """Build a record, format it, and return the parsed JSON payload."""
    logger = logging.getLogger("test.logger")
    record = logger.makeRecord(
        name=logger.name,
        level=level,
        fn="test_logger",
        lno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for k, v in attrs.items():
        setattr(record, k, v)
    return json.loads(_JsonFormatter().format(record))


@pytest.fixture()
def _clean_root() -> Generator[None, None, None]:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    root.handlers.clear()
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.mark.usefixtures("_clean_root")
def test_configure_root_logging_installs_json_handler_once(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = logging.getLogger()

    configure_root_logging()
    configure_root_logging()

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, _JsonFormatter)


@pytest.mark.usefixtures("_clean_root")
def test_explicit_level_wins_over_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    configure_root_logging("WARNING")

    assert logging.getLogger().level == logging.WARNING


def test_json_formatter_basic_fields() -> None:
    payload = _render("hello-world")

    assert payload["message"] == "hello-world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert "ts" in payload


def test_json_formatter_request_id_and_extra(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REQUEST_ID", raising=False)
    payload = _render("x", request_id="abc-123", extra={"entity": "EntityA"})
    assert payload["request_id"] == "abc-123"
    assert payload["entity"] == "EntityA"

    monkeypatch.setenv("REQUEST_ID", "env-7")
    assert _render("y")["request_id"] == "env-7"


def test_json_formatter_exception_fields() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        payload = _render("failed", level=logging.ERROR, exc_info=sys.exc_info())

    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"


def test_get_json_logger_propagates_to_root() -> None:
    logger = get_json_logger("modelentities.sample")

    assert logger.name == "modelentities.sample"
    assert logger.propagate is True
