"""Unit tests for AnsiStripContext."""

import os

import pytest

from ansistrip.core.context import AnsiStripContext
from ansistrip.core.errors import AnsiStripError, UserError
from ansistrip.core.logging.levels import LogLevel
from ansistrip.core.logging.logger import AnsiStripLogger


class TestAnsiStripContext:
    """Test suite for AnsiStripContext."""

    def test_defaults(self):
        """Test a fresh context before initialization."""
        ctx = AnsiStripContext()

        assert isinstance(ctx.logger, AnsiStripLogger)
        assert ctx.env is None
        assert ctx.strings is False
        assert ctx.log_level is LogLevel.INFO

    def test_config_file_override(self, config_file):
        """Test ANSISTRIP_CONFIG selects the config file."""
        assert AnsiStripContext().config_file == str(config_file)

    def test_config_file_default(self, monkeypatch, tmp_path):
        """Test the config file defaults to ~/.ansistrip/ansistrip.cfg."""
        monkeypatch.delenv("ANSISTRIP_CONFIG")
        ctx = AnsiStripContext()
        ctx.user_home_dir = str(tmp_path)

        expected = os.path.join(str(tmp_path), ".ansistrip", "ansistrip.cfg")
        assert ctx.config_file == expected

    def test_initialize_defaults(self):
        """Test initialization with no settings."""
        ctx = AnsiStripContext()
        ctx.initialize()

        assert ctx.strings is False
        assert ctx.log_level is LogLevel.INFO
        assert ctx.logger.log_level is LogLevel.INFO

    def test_initialize_from_settings(self, config_file):
        """Test settings are applied when no explicit values are given."""
        config_file.write_text("[config]\nSTRINGS=on\nLOG_LEVEL=warn\n")
        ctx = AnsiStripContext()
        ctx.initialize()

        assert ctx.strings is True
        assert ctx.log_level is LogLevel.WARN

    def test_explicit_values_win(self, config_file):
        """Test explicit arguments override settings."""
        config_file.write_text("[config]\nSTRINGS=on\nLOG_LEVEL=warn\n")
        ctx = AnsiStripContext()
        ctx.initialize(log_level=LogLevel.DEBUG, strings=False)

        assert ctx.strings is False
        assert ctx.log_level is LogLevel.DEBUG

    def test_invalid_setting(self):
        """Test an invalid setting raises UserError."""
        ctx = AnsiStripContext()
        ctx._user_env_args = ["STRINGS=perhaps"]

        with pytest.raises(UserError):
            ctx.initialize()

    def test_initialize_twice(self):
        """Test a context can only be initialized once."""
        ctx = AnsiStripContext()
        ctx.initialize()

        with pytest.raises(AnsiStripError, match="already been initialized"):
            ctx.initialize()
