"""Unit tests for loosetype.logging module."""

import logging

import pytest
from rich.logging import RichHandler

from loosetype.config import LOG_LEVEL_ENV_VAR, InvalidLogLevelError
from loosetype.logging import (
    CONSOLE_HANDLER_NAME,
    PROJECT_LOGGER,
    config_console_handler,
    configure_logging,
)

# pylint: disable=redefined-outer-name


@pytest.fixture
def project_logger():
    """Yield the package logger and restore its handlers and level afterwards."""
    logger = logging.getLogger(PROJECT_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def make_record(name: str, msg: str = "msg") -> logging.LogRecord:
    """Build a minimal log record for the given logger name."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, msg, None, None)


def test_console_handler_defaults():
    """The console handler uses the given level and carries its name."""
    handler = config_console_handler(level=logging.INFO)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert handler.get_name() == CONSOLE_HANDLER_NAME
    assert not handler.filters


def test_console_handler_formats_message_only():
    """Outside debug mode only the message text is formatted."""
    handler = config_console_handler(color=False)
    record = make_record("loosetype.sanitizer", "Invalid JSON")
    assert handler.format(record) == "Invalid JSON"


def test_console_handler_debug_mode():
    """Debug mode forces DEBUG and names the logger in each message."""
    handler = config_console_handler(level=logging.ERROR, debug_mode=True, color=False)
    assert handler.level == logging.DEBUG
    record = make_record("loosetype.color", "Not a hex colour")
    assert handler.format(record) == "loosetype.color: Not a hex colour"


def test_configure_logging_replaces_previous_handler(project_logger):
    """Repeated calls keep a single console handler on the package logger."""
    first = configure_logging(level=logging.INFO)
    second = configure_logging(level=logging.DEBUG)
    rich_handlers = [h for h in project_logger.handlers if isinstance(h, RichHandler)]
    assert rich_handlers == [second]
    assert first not in project_logger.handlers
    assert project_logger.level == logging.DEBUG


def test_configure_logging_keeps_application_handlers(project_logger):
    """Only the handler installed by configure_logging is replaced."""
    own = logging.NullHandler()
    project_logger.addHandler(own)
    configure_logging(level=logging.INFO)
    configure_logging(level=logging.INFO)
    assert own in project_logger.handlers
    named = [
        h for h in project_logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME
    ]
    assert len(named) == 1


def test_configure_logging_reads_environment(monkeypatch, project_logger):
    """Without an explicit level the environment decides."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "error")
    handler = configure_logging()
    assert handler.level == logging.ERROR
    assert project_logger.level == logging.ERROR


def test_configure_logging_rejects_bad_environment(monkeypatch, project_logger):
    """An unknown level in the environment is reported, nothing is installed."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
    before = list(project_logger.handlers)
    with pytest.raises(InvalidLogLevelError):
        configure_logging()
    assert project_logger.handlers == before
