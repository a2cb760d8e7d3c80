"""Unit tests for the ansistrip logger and its configuration."""

import logging
import sys

import pytest

from ansistrip.ansi import strip_ansi
from ansistrip.core.logging import handler, levels
from ansistrip.core.logging.logger import AnsiStripLogger
from ansistrip.core.logging.utils import configure_logging, get_caller_fq_name


@pytest.fixture
def logger():
    """Return a logger configured at INFO."""
    return configure_logging(levels.LogLevel.INFO)


def read_err(capsys):
    """Return captured stderr without color codes."""
    return strip_ansi(capsys.readouterr().err)


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_returns_ansistrip_logger(self, logger):
        """Test the configured logger has the custom class and one handler."""
        assert isinstance(logger, AnsiStripLogger)
        assert logger.propagate is False
        assert [type(h) for h in logger.handlers] == [handler.AnsiStripLogHandler]

    def test_idempotent(self, logger):
        """Test configuring again reuses the handler and updates the level."""
        again = configure_logging(levels.LogLevel.DEBUG)

        assert again is logger
        assert len(again.handlers) == 1
        assert again.log_level is levels.LogLevel.DEBUG

    def test_does_not_change_default_logger_class(self, logger):
        """Test other loggers keep the standard class."""
        assert logging.getLoggerClass() is logging.Logger

    def test_rejects_preexisting_plain_logger(self):
        """Test a plain logger created too early is reported."""
        logging.getLogger("ansistrip")

        with pytest.raises(TypeError, match="created before logging"):
            configure_logging()


class TestAnsiStripLogger:
    """Test suite for AnsiStripLogger."""

    @pytest.mark.parametrize(
        "method,prefix",
        [
            ("info", "[i]  "),
            ("warn", "[w]  "),
            ("warning", "[w]  "),
            ("error", "[e]  "),
            ("debug", "[v]  "),
        ],
    )
    def test_level_methods(self, method, prefix, capsys):
        """Test each level method writes its marker at debug level."""
        logger = configure_logging(levels.LogLevel.DEBUG)
        capsys.readouterr()

        getattr(logger, method)("test message")

        err = read_err(capsys)
        assert err.startswith(prefix)
        assert "test message" in err

    def test_blank_messages_dropped(self, logger, capsys):
        """Test blank messages are not logged."""
        logger.info("   ")
        assert capsys.readouterr().err == ""

    def test_messages_stripped(self, logger, capsys):
        """Test surrounding whitespace is removed."""
        logger.info("  padded  \n")
        assert read_err(capsys) == "[i]  padded\n"

    def test_user_handler_respects_level(self, logger, capsys):
        """Test stderr only shows records at or above the user level."""
        logger.debug("hidden")
        logger.info("shown")

        err = read_err(capsys)
        assert "hidden" not in err
        assert "[i]  shown" in err

    def test_logs_go_to_stderr(self, logger, capsys):
        """Test nothing is written to stdout."""
        logger.error("problem")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[e]  problem" in strip_ansi(captured.err)

    def test_set_level_debug(self, logger, capsys):
        """Test debug level shows debug records with the caller."""
        logger.set_level(levels.LogLevel.DEBUG)
        logger.debug("details")

        err = read_err(capsys)
        assert "[v]  " in err
        assert "test_logger.py" in err
        assert "details" in err
        assert logger._formatter.always_verbose is True

    def test_set_level_error(self, logger, capsys):
        """Test error level hides warnings at the logger and its handler."""
        logger.set_level(levels.LogLevel.ERROR)
        logger.warn("careful")

        assert capsys.readouterr().err == ""
        assert logger.level == logging.ERROR
        assert logger.handlers[0].level == logging.ERROR

    def test_handler_follows_current_stderr(self):
        """Test the user handler writes to whatever sys.stderr is now."""
        h = handler.AnsiStripLogHandler()
        h.stream = None
        assert h.stream is sys.stderr


def test_get_caller_fq_name():
    """Test the caller name includes module, file and line."""

    def inner():
        return get_caller_fq_name(stacklevel=2)

    name = inner()
    assert "test_logger.py" in name
    assert name.count(":") == 2
