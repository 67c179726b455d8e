"""Unit tests for loosetype.config module."""

import logging

import pytest

from loosetype.config import (
    DEFAULT_FALLBACK,
    LOG_LEVEL_ENV_VAR,
    InvalidLogLevelError,
    get_log_level,
)


def test_default_fallback_is_empty_text():
    """The library-wide fallback is the empty string."""
    assert DEFAULT_FALLBACK == ""


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_unset_level_defaults_to_warning(monkeypatch, raw):
    """An unset or blank variable means WARNING."""
    if raw is None:
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    else:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert get_log_level() == logging.WARNING


@pytest.mark.parametrize(
    "raw, expected",
    [("debug", logging.DEBUG), (" INFO ", logging.INFO), ("Error", logging.ERROR)],
)
def test_level_names_are_case_insensitive(monkeypatch, raw, expected):
    """Level names are parsed case-insensitively."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert get_log_level() == expected


def test_unknown_level_raises(monkeypatch):
    """Unknown level names raise InvalidLogLevelError."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "LOUD")
    with pytest.raises(InvalidLogLevelError, match="Invalid log level: LOUD") as exc:
        get_log_level()
    assert exc.value.level_name == "LOUD"
