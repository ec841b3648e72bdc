"""Tests for structured logging helpers and credential resolution."""

from __future__ import annotations

import json
import logging

import pytest

from config import Settings
from core.errors import ConfigError
from core.logging import bootstrap_logging, get_context, get_logger, log_context, shutdown_logging
from core.logging.formatter import ConsoleFormatter, JSONFormatter
from core.logging.logger import TRACE, to_level


def make_record(msg: str = "hello") -> logging.LogRecord:
    record = logging.LogRecord("faceit.test", logging.INFO, __file__, 10, msg, None, None, func="fn")
    record.service = "stats"
    return record


def test_log_context_is_scoped():
    with log_context(player_id="p1", competition_id=None):
        assert get_context() == {"player_id": "p1"}
        with log_context(competition_id="A"):
            assert get_context() == {"player_id": "p1", "competition_id": "A"}
        assert "competition_id" not in get_context()
    assert get_context() == {}


def test_json_formatter_includes_service_and_context():
    with log_context(player_id="p1"):
        payload = json.loads(JSONFormatter().format(make_record()))

    assert payload["message"] == "hello"
    assert payload["service"] == "stats"
    assert payload["level"] == "INFO"
    assert payload["context"] == {"player_id": "p1"}


def test_console_formatter_without_color():
    line = ConsoleFormatter(color=False).format(make_record("aggregated 2/3 matches"))
    assert " | INFO | stats | faceit.test:fn:10 | aggregated 2/3 matches" in line
    assert "\033[" not in line


def test_to_level():
    assert to_level("trace") == TRACE
    assert to_level("warning") == logging.WARNING
    assert to_level("bogus") == logging.INFO
    assert to_level(15) == 15


def test_lazy_messages_are_not_built_when_disabled(caplog):
    calls = []

    def expensive() -> str:
        calls.append(1)
        return "built"

    logger = get_logger("faceit.lazy", service="test")
    with caplog.at_level(logging.INFO, logger="faceit.lazy"):
        logger.debug(expensive)
        logger.info(expensive)

    assert calls == [1]
    assert [r.getMessage() for r in caplog.records] == ["built"]
    assert caplog.records[0].service == "test"


def test_bootstrap_writes_json_lines(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_CONSOLE", "false")
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        bootstrap_logging(level="INFO", log_dir=tmp_path, log_file_name="test.jsonl")
        get_logger("faceit.file", service="cli").info("written")
        shutdown_logging()

        lines = (tmp_path / "test.jsonl").read_text().splitlines()
        assert json.loads(lines[-1])["message"] == "written"
    finally:
        shutdown_logging()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_resolve_api_key_prefers_environment(monkeypatch):
    monkeypatch.setenv("FACEIT_API_KEY", "from-env")
    monkeypatch.setattr(Settings, "FACEIT_API_KEY", "from-file")
    assert Settings.resolve_api_key() == "from-env"


def test_resolve_api_key_raises_config_error(monkeypatch):
    monkeypatch.delenv("FACEIT_API_KEY", raising=False)
    monkeypatch.setattr(Settings, "FACEIT_API_KEY", "")

    with pytest.raises(ConfigError) as excinfo:
        Settings.resolve_api_key()

    assert excinfo.value.status_code == 500
