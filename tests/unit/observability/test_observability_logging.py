"""Unit tests for structured logging and correlation context."""

from __future__ import annotations

import dataclasses
import json
import logging

import pytest
import structlog

from sqlmask.config.settings import LoggingSettings
from sqlmask.observability import (
    CorrelationContext,
    CorrelationProcessor,
    RequestContext,
    configure_logging,
    get_logger,
)
from sqlmask.observability.logging import configure_from_settings


@pytest.fixture(autouse=True)
def _reset():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    CorrelationContext.clear()
    yield
    CorrelationContext.clear()
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestRequestContext:
    def test_new_generates_id(self) -> None:
        a, b = RequestContext.new(), RequestContext.new()
        assert a.correlation_id and a.correlation_id != b.correlation_id

    def test_carries_only_correlation_id(self) -> None:
        assert [f.name for f in dataclasses.fields(RequestContext)] == ["correlation_id"]


class TestCorrelationContext:
    def test_get_returns_none_when_unset(self) -> None:
        assert CorrelationContext.get() is None

    def test_get_or_new_is_stable(self) -> None:
        first = CorrelationContext.get_or_new()
        assert CorrelationContext.get_or_new() is first

    def test_set_and_clear(self) -> None:
        CorrelationContext.set(RequestContext("x"))
        assert CorrelationContext.get().correlation_id == "x"
        CorrelationContext.clear()
        assert CorrelationContext.get() is None


class TestCorrelationProcessor:
    def test_injects_correlation_id(self) -> None:
        CorrelationContext.set(RequestContext("cid"))
        event = CorrelationProcessor()(None, "info", {"event": "x"})
        assert event == {"event": "x", "correlation_id": "cid"}

    def test_explicit_value_wins(self) -> None:
        CorrelationContext.set(RequestContext("cid"))
        event = CorrelationProcessor()(None, "info", {"correlation_id": "mine"})
        assert event["correlation_id"] == "mine"

    def test_no_context_is_noop(self) -> None:
        assert CorrelationProcessor()(None, "info", {"event": "x"}) == {"event": "x"}


class TestConfigureLogging:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level=logging.INFO, json=True)
        CorrelationContext.set(RequestContext("cid-9"))
        get_logger("sqlmask.test", component="tests").info("hello", rule_id="1")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "hello"
        assert payload["rule_id"] == "1"
        assert payload["component"] == "tests"
        assert payload["correlation_id"] == "cid-9"
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level=logging.WARNING)
        get_logger("sqlmask.test").info("quiet")
        assert "quiet" not in capsys.readouterr().err

    def test_from_settings(self) -> None:
        configure_from_settings(LoggingSettings(level="DEBUG", json=False))
        assert logging.getLogger().level == logging.DEBUG
