"""Unit tests for error handling module.

Tests custom exception classes and error formatting.
"""

import pytest

from ansistrip.core.errors import AnsiStripError, StreamError, UserError


class TestAnsiStripError:
    """Test suite for AnsiStripError base exception."""

    def test_initialization_with_message(self):
        """Test AnsiStripError with a message."""
        error = AnsiStripError("Test error message")

        assert error.msg == "Test error message"
        assert str(error) == "Test error message"
        assert error.exit_code == 1
        assert error.show_traceback is True

    def test_initialization_empty(self):
        """Test AnsiStripError with empty message."""
        error = AnsiStripError()

        assert error.msg == ""
        assert str(error) == ""

    def test_error_chaining(self):
        """Test that errors can be chained with from."""
        original_error = ValueError("Original error")

        with pytest.raises(AnsiStripError) as exc_info:
            raise AnsiStripError("Wrapped error") from original_error

        assert exc_info.value.__cause__ is original_error


class TestStreamError:
    """Test suite for StreamError."""

    def test_exit_code_and_traceback(self):
        """Test StreamError exits with 1 and hides the traceback."""
        error = StreamError("Failed to read input from <stdin>: boom")

        assert isinstance(error, AnsiStripError)
        assert error.exit_code == 1
        assert error.show_traceback is False
        assert str(error) == "Failed to read input from <stdin>: boom"


class TestUserError:
    """Test suite for UserError exception."""

    def test_initialization_with_message_only(self):
        """Test UserError with just a message."""
        error = UserError("User made an error")

        assert str(error) == "User error: User made an error"
        assert error.exit_code == 2
        assert error.show_traceback is False

    def test_initialization_with_hint(self):
        """Test UserError with a hint."""
        error = UserError("Bad input", hint_msg="Check the format")

        assert str(error) == "User error: Bad input\nHint: Check the format"

    def test_initialization_empty_hint(self):
        """Test UserError with empty hint."""
        error = UserError("Error message", hint_msg="")

        assert "Hint:" not in str(error)

    def test_can_be_caught_as_base_error(self):
        """Test UserError can be caught as AnsiStripError."""
        with pytest.raises(AnsiStripError) as exc_info:
            raise UserError("Invalid", hint_msg="Fix this")

        assert isinstance(exc_info.value, UserError)
        assert "Hint: Fix this" in str(exc_info.value)
