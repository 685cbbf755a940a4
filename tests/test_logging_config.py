"""
Tests for logging setup and formatters.
"""

from __future__ import annotations

import json
import logging

import pytest

from infra_sync.logging_config import HumanFormatter, JSONFormatter, setup_logging


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="infra_sync.sync.syncer",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestFormatters:

    def test_json_fields(self):
        data = json.loads(JSONFormatter().format(_record(commit="abc123", path="/tmp/x")))

        assert data["level"] == "INFO"
        assert data["logger"] == "infra_sync.sync.syncer"
        assert data["message"] == "hello"
        assert data["commit"] == "abc123"
        assert data["path"] == "/tmp/x"

    def test_json_omits_missing_extras(self):
        data = json.loads(JSONFormatter().format(_record()))
        assert "commit" not in data

    def test_human_format(self):
        line = HumanFormatter().format(_record("Copied 2 file(s)"))

        assert "INFO" in line
        assert "[syncer" in line
        assert line.endswith("Copied 2 file(s)")


class TestSetupLogging:

    def test_explicit_arguments(self, restore_root_logger):
        setup_logging("debug", "json")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_environment(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LOG_FORMAT", "text")

        setup_logging()

        assert restore_root_logger.level == logging.WARNING
        assert isinstance(restore_root_logger.handlers[0].formatter, HumanFormatter)

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging("chatty")
        assert restore_root_logger.level == logging.INFO
