"""Tests for settings and structured logging."""

from __future__ import annotations

import io

import orjson
import pytest
from pydantic import ValidationError

from toolxml import convert, convert_many
from toolxml.foundation.config import ToolxmlSettings, clear_settings_cache, get_settings
from toolxml.observability import (
    ConsoleRenderer,
    JsonRenderer,
    NoOpRenderer,
    configure_from_settings,
    configure_logging,
    get_logger,
    log_context,
)


# ═════════════════════════════════════════════════════════════════════════════
# Settings
# ═════════════════════════════════════════════════════════════════════════════


def test_defaults() -> None:
    settings = get_settings()

    assert settings.debug is False
    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "console"
    assert settings.batch.max_workers == 1
    assert (settings.schema_limits.max_tools, settings.schema_limits.max_files) == (5, 5)


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOOLXML_DEBUG", "true")
    monkeypatch.setenv("TOOLXML_LOG_LEVEL", "debug")
    monkeypatch.setenv("TOOLXML_LOG_FORMAT", "JSON")
    monkeypatch.setenv("TOOLXML_SCHEMA_MAX_FILES", "2")
    clear_settings_cache()
    settings = get_settings()

    assert settings.debug is True
    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"
    assert settings.schema_limits.max_files == 2


@pytest.mark.parametrize(("var", "value"), [
    ("TOOLXML_SCHEMA_MAX_TOOLS", "0"),
    ("TOOLXML_SCHEMA_MAX_TOOLS", "51"),
    ("TOOLXML_BATCH_MAX_WORKERS", "0"),
    ("TOOLXML_LOG_FORMAT", "xml"),
])
def test_invalid_values_rejected(monkeypatch: pytest.MonkeyPatch, var: str, value: str) -> None:
    monkeypatch.setenv(var, value)
    with pytest.raises(ValidationError):
        ToolxmlSettings()


# ═════════════════════════════════════════════════════════════════════════════
# Logging
# ═════════════════════════════════════════════════════════════════════════════


def test_console_renderer_key_values() -> None:
    out = io.StringIO()
    configure_logging("console", "DEBUG", output=out)
    get_logger("toolxml.test", run=1).debug("converted", code="PARSE_ERROR", note="two words")

    line = out.getvalue().strip()
    assert "[debug] converted" in line
    assert "code=PARSE_ERROR" in line
    assert "logger=toolxml.test" in line
    assert "note='two words'" in line
    assert "run=1" in line


def test_level_filters_entries() -> None:
    out = io.StringIO()
    configure_logging("console", "WARNING", output=out)
    log = get_logger("toolxml.test")
    log.debug("hidden")
    log.warning("shown")

    assert "hidden" not in out.getvalue()
    assert "shown" in out.getvalue()


def test_json_renderer_lines() -> None:
    out = io.StringIO()
    assert isinstance(configure_logging("json", "INFO", output=out), JsonRenderer)
    with log_context(request_id="r-1"):
        get_logger("toolxml.test").bind(total=2).info("batch converted")

    entry = orjson.loads(out.getvalue())
    assert entry["event"] == "batch converted"
    assert entry["level"] == "info"
    assert entry["request_id"] == "r-1"
    assert entry["total"] == 2
    assert entry["logger"] == "toolxml.test"


def test_log_context_is_scoped() -> None:
    out = io.StringIO()
    configure_logging("json", "INFO", output=out)
    with log_context(batch="a"):
        pass
    get_logger().info("after")

    assert "batch" not in orjson.loads(out.getvalue())


def test_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging("xml")


def test_configure_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOOLXML_LOG_FORMAT", "none")
    clear_settings_cache()
    assert isinstance(configure_from_settings(), NoOpRenderer)

    monkeypatch.setenv("TOOLXML_LOG_FORMAT", "console")
    monkeypatch.setenv("TOOLXML_DEBUG", "1")
    clear_settings_cache()
    renderer = configure_from_settings()
    assert isinstance(renderer, ConsoleRenderer)

    out = io.StringIO()
    configure_logging("console", "DEBUG", output=out)
    convert("not json")
    assert "conversion failed" in out.getvalue()


def test_converter_logs_failures_at_debug() -> None:
    out = io.StringIO()
    configure_logging("json", "DEBUG", output=out)
    convert({"response_type": "nope"})

    entry = orjson.loads(out.getvalue().splitlines()[0])
    assert entry["event"] == "conversion failed"
    assert entry["code"] == "SHAPE_ERROR"
    assert entry["logger"] == "toolxml.converter"


def test_batch_logs_summary() -> None:
    out = io.StringIO()
    configure_logging("json", "DEBUG", output=out)
    convert_many([{"response_type": "text_only", "text_response": "a"}, "{bad"])

    summary = orjson.loads(out.getvalue().splitlines()[-1])
    assert summary["event"] == "batch converted"
    assert (summary["total"], summary["failed"]) == (2, 1)
    assert "elapsed_ms" in summary


def test_logging_does_not_change_results() -> None:
    configure_logging("none")
    quiet = convert("{bad")
    configure_logging("console", "DEBUG", output=io.StringIO())

    assert convert("{bad") == quiet
