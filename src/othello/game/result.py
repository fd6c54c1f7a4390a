"""
Tagged success/failure values returned by the engine.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .errors import ResultError


class ErrorKind(Enum):
    """Every failure an engine operation can report."""
    COORD_OUT_OF_RANGE = "CoordOutOfRange"
    NOT_VALID_COORD = "NotValidCoord"
    CELL_OCCUPIED = "CellOccupied"
    CELL_GET_ERROR = "CellGetError"
    PLAYER_GET_ERROR = "PlayerGetError"
    CELL_SET_ERROR = "CellSetError"
    GAME_FINISHED = "GameFinished"
    SOURCE_INVALID = "SourceInvalid"


@dataclass(frozen=True)
class Result:
    """
    Outcome of an engine operation.

    A successful result carries ``value``; a failed one carries ``error`` and,
    when it wraps a lower level failure, that failure as ``cause``.
    """
    value: Any = None
    error: Optional[ErrorKind] = None
    cause: Optional['Result'] = None

    @classmethod
    def success(cls, value: Any = None) -> 'Result':
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, cause: Optional['Result'] = None) -> 'Result':
        return cls(error=kind, cause=cause)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Any:
        """Return the value, raising ResultError if this is a failure."""
        if self.error is not None:
            raise ResultError(self)
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        return default if self.error is not None else self.value

    def __str__(self) -> str:
        if self.ok:
            return f"Ok({self.value!r})"
        if self.cause is not None:
            return f"Error({self.error.value}, cause={self.cause})"
        return f"Error({self.error.value})"
