"""
Centralized application initialization.

Entrypoints should call `initialize_app` to load the settings and configure
logging before solving anything.
"""

import structlog

from aoc.core.config import AppSettings, get_settings
from aoc.core.logger import setup_logging

_logger = structlog.get_logger(__name__)


class AppContext:
    """
    Centralized application context.
    """

    def __init__(self, settings: AppSettings):
        self.settings = settings
        setup_logging(self.settings)
        _logger.debug("Application context initialized.")

    @classmethod
    def create(cls) -> "AppContext":
        """
        Creates a new instance of the application context.
        """
        settings = get_settings()
        return cls(settings)


def initialize_app() -> AppContext:
    """
    Initializes the application by creating the application context.
    """
    return AppContext.create()
