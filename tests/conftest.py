import pytest

from aoc.core.config import get_settings


@pytest.fixture(scope="function", autouse=True)
def set_test_environment(monkeypatch, tmp_path):
    """
    Gives every test a clean, predictable configuration.
    Nothing is read from a developer's .env file or real input directory.
    """
    monkeypatch.setattr("aoc.core.config.loader.load_dotenv", lambda: None)
    monkeypatch.setenv("AOC_INPUT_DIR", str(tmp_path / "inputs"))
    monkeypatch.setenv("AOC_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("AOC_LOG_FILE", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="function")
def input_file(tmp_path):
    """Writes puzzle input text to a temporary file and returns its path."""

    def write(text: str, name: str = "input.txt") -> str:
        path = tmp_path / name
        path.write_text(text)
        return str(path)

    return write
