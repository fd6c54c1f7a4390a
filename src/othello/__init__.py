"""
Othello (Reversi) rules engine with a text console.
"""

from .game import Board, Coord, ErrorKind, Result, parse_coord

__version__ = "0.1"

__all__ = ['Board', 'Coord', 'ErrorKind', 'Result', 'parse_coord']
