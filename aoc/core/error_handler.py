"""
Simple, standardized error handling for the application.
"""

import functools
from typing import Callable

import structlog

from aoc.core.errors import AocError

logger = structlog.get_logger(__name__)


def log_exception(func: Callable) -> Callable:
    """
    Decorator to log exceptions before re-raising them.

    Unexpected exceptions are logged as errors with full traceback information.
    An `AocError` is logged at debug level only, since the caller reports it.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except AocError as e:
            logger.debug(
                f"{type(e).__name__} in {func.__name__}: {e}",
                func_name=func.__name__,
            )
            raise
        except Exception as e:
            logger.error(
                f"Exception in {func.__name__}: {str(e)}",
                exc_info=True,
                func_name=func.__name__,
            )
            raise

    return wrapper
