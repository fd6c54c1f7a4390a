"""
Exceptions for the Othello engine.

Expected, caller-triggerable conditions are reported through Result values
(see result.py). Exceptions are reserved for faults the caller cannot recover
from, such as a bad game configuration.
"""


class OthelloError(Exception):
    """Base exception for the package."""


class ConfigurationError(OthelloError, ValueError):
    """The board could not be built from the given configuration."""


class ResultError(OthelloError):
    """Raised when unwrapping a failed Result."""

    def __init__(self, result):
        self.result = result
        super().__init__(f"{result.error.value}")
