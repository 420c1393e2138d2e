"""Tests for the pipeline logger setup."""

import logging

import pytest

from morning_report.core.logger import LOG_FORMAT, resolve_level, setup_logger


@pytest.fixture
def logger_name(request):
    """Unique logger name per test; handlers are closed and removed afterwards."""
    name = f"morning_report.test.{request.node.name}"
    yield name
    log = logging.getLogger(name)
    for handler in list(log.handlers):
        handler.close()
        log.removeHandler(handler)


def test_setup_logger_writes_file_and_console(tmp_path, logger_name):
    log_file = tmp_path / "logs" / "pipeline.log"
    log = setup_logger(logger_name, str(log_file), level="INFO")

    kinds = sorted(type(h).__name__ for h in log.handlers)
    assert kinds == ["FileHandler", "StreamHandler"]
    assert all(h.formatter._fmt == LOG_FORMAT for h in log.handlers)

    log.info("quotes fetched")
    for handler in log.handlers:
        handler.flush()
    assert "| INFO     |" in log_file.read_text(encoding="utf-8")
    assert "quotes fetched" in log_file.read_text(encoding="utf-8")


def test_setup_logger_is_idempotent(tmp_path, logger_name):
    log_file = str(tmp_path / "pipeline.log")
    first = setup_logger(logger_name, log_file, level="WARNING")
    second = setup_logger(logger_name, log_file, level="DEBUG")

    assert first is second
    assert len(second.handlers) == 2
    assert second.level == logging.WARNING


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    (" error ", logging.ERROR),
    ("chatty", logging.INFO),
])
def test_resolve_level_names(name, expected):
    assert resolve_level(name) == expected


def test_resolve_level_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert resolve_level() == logging.WARNING

    monkeypatch.delenv("LOG_LEVEL")
    assert resolve_level() == logging.INFO
