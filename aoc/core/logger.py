import logging
import logging.handlers
import os
import sys

import structlog

from aoc.core.config import AppSettings

LOG_FILE_NAME = "aoc.log"

_installed_handlers: list = []


def setup_logging(settings: AppSettings) -> None:
    """
    Configures structured logging using structlog.

    Console output goes to stderr so that stdout only ever carries answers.
    """
    console_level = getattr(logging, settings.console_log_level.upper(), logging.WARNING)

    # Shared processors for structlog
    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Replace the handlers of any earlier call rather than stacking them
    root_logger = logging.getLogger()
    while _installed_handlers:
        root_logger.removeHandler(_installed_handlers.pop())
    root_logger.setLevel(logging.DEBUG)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        )
    )
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    # Rotating file handler (JSON format)
    if settings.log_to_file:
        log_dir = settings.paths.log_dir
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
            )
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    structlog.get_logger(__name__).debug("Logging configured successfully.")
