import logging
import os
from unittest.mock import MagicMock, patch

from aoc.core.config import AppSettings, PathSettings
from aoc.core.logger import setup_logging


def make_settings(log_to_file: bool) -> MagicMock:
    mock_settings = MagicMock(spec=AppSettings)
    mock_settings.paths = MagicMock(spec=PathSettings)
    mock_settings.paths.log_dir = "/fake/log/dir"
    mock_settings.console_log_level = "INFO"
    mock_settings.log_to_file = log_to_file
    return mock_settings


@patch("os.makedirs")
@patch("logging.handlers.RotatingFileHandler")
@patch("logging.StreamHandler")
def test_setup_logging_with_file(mock_stream_handler, mock_file_handler, mock_makedirs):
    """Test the logging setup function when file logging is enabled."""
    mock_stream_handler.return_value.level = logging.INFO
    mock_file_handler.return_value.level = logging.DEBUG

    setup_logging(make_settings(log_to_file=True))

    mock_makedirs.assert_called_once_with("/fake/log/dir", exist_ok=True)
    mock_stream_handler.assert_called_once()
    mock_file_handler.assert_called_once_with(
        os.path.join("/fake/log/dir", "aoc.log"),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
    )
    mock_stream_handler.return_value.setLevel.assert_called_once_with(logging.INFO)


@patch("os.makedirs")
@patch("logging.handlers.RotatingFileHandler")
@patch("logging.StreamHandler")
def test_setup_logging_console_only(mock_stream_handler, mock_file_handler, mock_makedirs):
    """Test that no log file is created unless asked for."""
    mock_stream_handler.return_value.level = logging.INFO

    setup_logging(make_settings(log_to_file=False))

    mock_stream_handler.assert_called_once()
    mock_file_handler.assert_not_called()
    mock_makedirs.assert_not_called()


def test_console_logs_go_to_stderr(capsys):
    """Answers own stdout, so log lines must never land there."""
    settings = make_settings(log_to_file=False)
    settings.console_log_level = "DEBUG"

    setup_logging(settings)
    logging.getLogger("aoc.test").warning("something happened")

    captured = capsys.readouterr()
    assert captured.out == ""
