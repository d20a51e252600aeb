"""
Tests for the error handler module.
"""

from unittest.mock import patch

import pytest

from aoc.core.error_handler import log_exception
from aoc.core.errors import AocError, InvalidInputError, PuzzleNotFoundError


def test_log_exception_reraises_and_logs():
    """Test the log_exception decorator with a failing function."""

    @log_exception
    def failing_function():
        raise ValueError("Test error")

    with patch("aoc.core.error_handler.logger.error") as mock_error:
        with pytest.raises(ValueError, match="Test error"):
            failing_function()

        mock_error.assert_called_once()
        assert mock_error.call_args[1]["exc_info"] is True
        assert mock_error.call_args[1]["func_name"] == "failing_function"


def test_log_exception_passes_through_results():
    @log_exception
    def add(a, b):
        return a + b

    with patch("aoc.core.error_handler.logger.error") as mock_error:
        assert add(2, 3) == 5
        mock_error.assert_not_called()


def test_error_hierarchy():
    """Errors can be caught either as AocError or as the matching builtin."""
    assert issubclass(InvalidInputError, AocError)
    assert issubclass(InvalidInputError, ValueError)
    assert issubclass(PuzzleNotFoundError, AocError)
    assert issubclass(PuzzleNotFoundError, LookupError)


def test_log_exception_keeps_expected_errors_quiet():
    """Errors the CLI reports itself are logged at debug level without a traceback."""

    @log_exception
    def bad_input():
        raise InvalidInputError("Bad number")

    with patch("aoc.core.error_handler.logger.error") as mock_error, patch(
        "aoc.core.error_handler.logger.debug"
    ) as mock_debug:
        with pytest.raises(InvalidInputError):
            bad_input()

        mock_error.assert_not_called()
        mock_debug.assert_called_once()
        assert "exc_info" not in mock_debug.call_args[1]
