"""
Interactive text console.
Renders the board, reads coordinates and submits them to the engine.
"""
import logging
from typing import Callable, Iterable, List, Optional

from ..game import Board, Coord, parse_coord

logger = logging.getLogger(__name__)

VALID_GLYPH = "o"
EMPTY_GLYPH = "·"
PROMPT = "Move (x,y): "


def render_board(board: Board, valid_coords: Iterable[Coord]) -> List[str]:
    """
    Render the board as lines of text.

    The first row holds the column numbers and every other row starts with its
    row number. Legal destinations are marked with ``o``, other empty cells
    with ``·`` and occupied cells with the owner's id.
    """
    valid = set(valid_coords)
    lines = []
    for y in range(board.height + 1):
        row = []
        for x in range(board.width + 1):
            if x == 0:
                row.append(" " if y == 0 else str(y))
                continue
            if y == 0:
                row.append(str(x))
                continue
            coord = Coord(x, y)
            cell = board.get_cell(coord).unwrap()
            if cell is None:
                row.append(VALID_GLYPH if coord in valid else EMPTY_GLYPH)
            else:
                row.append(cell.player.id)
        lines.append(" ".join(row))
    return lines


class Console:
    """
    Plays a game on one board through text input and output.

    There is no game-over detection; ``run`` keeps asking for moves until the
    input stream is exhausted.
    """

    def __init__(self, board: Board, input_fn: Callable[[str], str] = input,
                 print_fn: Callable[[str], None] = print, session_logger=None):
        self.board = board
        self.input_fn = input_fn
        self.print_fn = print_fn
        self.session_logger = session_logger

    def show(self) -> None:
        """Print the board and whose turn it is."""
        valid_coords = self.board.get_next_valid_coords().unwrap()
        for line in render_board(self.board, valid_coords):
            self.print_fn(line)
        self.print_fn(f"Current player: {self.board.get_current_player().unwrap()}")

    def play_turn(self) -> None:
        """
        Prompt until one move has been applied.

        Raises:
            EOFError: If the input runs out before a move is made
        """
        while True:
            source = self.input_fn(PROMPT)
            parsed = parse_coord(source)
            if not parsed:
                self.print_fn(f"Invalid input {source!r}, expected x,y")
                continue

            coord: Coord = parsed.value
            result = self.board.next(coord)
            if not result:
                self.print_fn(f"Cannot play {coord}: {result.error.value}")
                continue

            turn = self.board.turns[-1]
            if self.session_logger is not None:
                self.session_logger.log_turn(turn, len(self.board.turns))
            else:
                logger.debug("%s played %s", turn.player, turn.coord)
            return

    def run(self, max_turns: Optional[int] = None) -> int:
        """
        Run the game loop.

        Args:
            max_turns: Stop after this many moves (default: no limit)

        Returns:
            Number of moves applied during this run
        """
        played = 0
        while max_turns is None or played < max_turns:
            self.show()
            try:
                self.play_turn()
            except EOFError:
                logger.info("Input closed after %d moves", played)
                break
            played += 1
        return played
