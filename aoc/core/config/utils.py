"""
Utility functions for configuration management.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_project_root() -> str:
    """Returns the project root directory."""
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))


def parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")
