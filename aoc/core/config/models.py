"""
Configuration models for the application.
"""

import os
from dataclasses import dataclass, field


@dataclass
class PathSettings:
    """
    Path settings.
    All paths are absolute and constructed from the project root unless
    overridden through the environment.
    """

    root_dir: str = field(init=False)
    input_dir: str = field(init=False)
    log_dir: str = field(init=False)

    def __post_init__(self):
        from .utils import get_project_root

        self.root_dir = get_project_root()
        self.input_dir = os.path.abspath(
            os.getenv("AOC_INPUT_DIR", os.path.join(self.root_dir, "inputs"))
        )
        self.log_dir = os.path.abspath(
            os.getenv("AOC_LOG_DIR", os.path.join(self.root_dir, "logs"))
        )

    def input_file(self, year: int, day: int) -> str:
        """Default location of the puzzle input for a given day."""
        return os.path.join(self.input_dir, str(year), f"day{day:02}.txt")


@dataclass
class AppSettings:
    """Main application settings container."""

    paths: PathSettings
    console_log_level: str = "WARNING"
    log_to_file: bool = False
