import os

import pytest

from aoc.core.config import get_settings
from aoc.core.errors import ConfigurationError


def test_get_settings_from_environment(monkeypatch, tmp_path):
    """Test that settings are loaded from the environment variables."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("AOC_LOG_FILE", "yes")

    settings = get_settings()

    assert settings.console_log_level == "DEBUG"
    assert settings.log_to_file is True
    assert settings.paths.input_dir == str(tmp_path / "inputs")
    assert settings.paths.log_dir == str(tmp_path / "logs")


def test_defaults_when_unset(monkeypatch):
    """Test the default values used when nothing is configured."""
    for name in ("AOC_INPUT_DIR", "AOC_LOG_DIR", "LOG_LEVEL", "AOC_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.console_log_level == "WARNING"
    assert settings.log_to_file is False
    assert settings.paths.input_dir == os.path.join(settings.paths.root_dir, "inputs")
    assert settings.paths.log_dir == os.path.join(settings.paths.root_dir, "logs")


def test_settings_are_cached():
    """Test that the same settings object is returned on every call."""
    assert get_settings() is get_settings()


def test_invalid_log_level(monkeypatch):
    """Test that an unknown log level is rejected."""
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        get_settings()


def test_input_file_path(tmp_path):
    settings = get_settings()
    assert settings.paths.input_file(2023, 7) == str(tmp_path / "inputs" / "2023" / "day07.txt")
