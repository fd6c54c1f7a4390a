"""
Text console for playing Othello in a terminal.
"""
from .console import Console, render_board

__all__ = ['Console', 'render_board']
