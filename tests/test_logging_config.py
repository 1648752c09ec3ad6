# tests/test_logging_config.py
"""Tests for the eventlog.logging_config module."""

import io
import logging

import pytest

from eventlog import EventLog
from eventlog.logging_config import (
    DEFAULT_LOGGING_CONFIG,
    LIBRARY_LOGGER_NAME,
    configure_logging,
    reset_logging,
    set_log_level,
)


@pytest.fixture(autouse=True)
def reset_library_logging():
    """Remove any handler installed by a test."""
    reset_logging()
    yield
    reset_logging()


class TestDefaultLoggingConfig:
    """Tests for default logging configuration."""

    def test_level_is_warning(self):
        assert DEFAULT_LOGGING_CONFIG["level"] == "WARNING"

    def test_propagates_by_default(self):
        assert DEFAULT_LOGGING_CONFIG["propagate"] is True


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_attaches_one_handler(self):
        stream = io.StringIO()

        library_logger = configure_logging(stream=stream)
        configure_logging(stream=stream)

        assert library_logger.name == LIBRARY_LOGGER_NAME
        assert len(library_logger.handlers) == 1
        assert library_logger.level == logging.WARNING

    def test_config_overrides(self):
        stream = io.StringIO()

        configure_logging(
            config={"level": "DEBUG", "format": "%(levelname)s|%(message)s"}, stream=stream
        )
        logging.getLogger("eventlog.custom").debug("hello")

        assert stream.getvalue() == "DEBUG|eventlog logging configured\nDEBUG|hello\n"

    def test_force_reconfigure_replaces_handler(self):
        first, second = io.StringIO(), io.StringIO()
        configure_logging(stream=first)

        library_logger = configure_logging(stream=second, force_reconfigure=True)
        library_logger.warning("after")

        assert len(library_logger.handlers) == 1
        assert first.getvalue() == ""
        assert "after" in second.getvalue()

    def test_echo_through_logging_sink(self):
        """Test echoed text reaches the configured handler."""
        stream = io.StringIO()
        configure_logging(config={"level": "INFO", "format": "%(message)s"}, stream=stream)

        EventLog(echo_level="info").info("visible")

        assert stream.getvalue() == "Info: visible\n"


class TestSetLogLevel:
    """Tests for set_log_level and reset_logging."""

    def test_by_name(self):
        set_log_level("debug")
        assert logging.getLogger(LIBRARY_LOGGER_NAME).level == logging.DEBUG

    def test_by_number(self):
        set_log_level(logging.ERROR)
        assert logging.getLogger(LIBRARY_LOGGER_NAME).level == logging.ERROR

    def test_unknown_name_falls_back(self):
        set_log_level("chatty")
        assert logging.getLogger(LIBRARY_LOGGER_NAME).level == logging.WARNING

    def test_reset(self):
        configure_logging(stream=io.StringIO())
        reset_logging()

        library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        assert library_logger.handlers == []
        assert library_logger.level == logging.NOTSET
        assert library_logger.propagate is True
