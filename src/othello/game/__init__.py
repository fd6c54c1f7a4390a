"""
Othello game module.
This package contains the rules engine for Othello.
"""

from .board import Board, Cell, Player, Turn
from .coord import Coord, DIRECTIONS, parse_coord
from .errors import ConfigurationError, OthelloError, ResultError
from .result import ErrorKind, Result

__all__ = [
    'Board', 'Cell', 'Player', 'Turn',
    'Coord', 'DIRECTIONS', 'parse_coord',
    'ConfigurationError', 'OthelloError', 'ResultError',
    'ErrorKind', 'Result',
]
