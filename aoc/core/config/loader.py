"""
Configuration loader that loads settings from environment variables.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

from .models import AppSettings, PathSettings
from .utils import parse_bool


@lru_cache(maxsize=None)
def get_settings() -> AppSettings:
    """
    Loads the application settings from environment variables.
    Uses a cache to ensure settings are loaded only once.
    """
    load_dotenv()

    settings = AppSettings(
        paths=PathSettings(),
        console_log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        log_to_file=parse_bool(os.getenv("AOC_LOG_FILE", "false")),
    )

    from .validator import validate_configuration

    validate_configuration(settings)

    return settings
