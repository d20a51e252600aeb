"""
Configuration validator that validates settings values.
"""

import logging

from aoc.core.errors import ConfigurationError

from .models import AppSettings

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_configuration(settings: AppSettings) -> None:
    """Validate configuration values and provide helpful warnings."""
    if settings.console_log_level not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, "
            f"got {settings.console_log_level!r}"
        )

    if settings.log_to_file and settings.paths.log_dir == settings.paths.input_dir:
        logging.getLogger(__name__).warning(
            f"Log directory and input directory are the same ({settings.paths.log_dir})."
        )
