"""
Exception types shared by the runner and the day solutions.
"""


class AocError(Exception):
    """Base class for all errors reported to the user."""


class InvalidInputError(AocError, ValueError):
    """The puzzle input could not be understood."""


class PuzzleNotFoundError(AocError, LookupError):
    """No solution exists for the requested year, day or part."""


class ConfigurationError(AocError):
    """A setting has an invalid value."""
