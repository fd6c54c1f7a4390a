"""
Board module for Othello.
Handles the grid, the player roster, turn order, legal-move discovery and captures.
Uses a sparse mapping from coordinate to cell; only occupied coordinates are stored.
"""
import copy
import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .coord import Coord, DIRECTIONS
from .errors import ConfigurationError
from .result import ErrorKind, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Player:
    """A participant, identified by a short label such as "B" or "W"."""
    id: str

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class Cell:
    """Occupancy of a single coordinate."""
    player: Player


@dataclass(frozen=True)
class Turn:
    """A completed placement."""
    player: Player
    coord: Coord


class Board:
    """
    Othello rules engine.

    The board owns the grid, the roster and the turn history. Whose turn it is
    is derived from the history alone: the first player in the roster moves
    first, then play rotates through the roster in order.

    Two rule variants are supported. With ``captures=True`` (standard Othello)
    a piece may only be placed where it sandwiches at least one opposing piece,
    and every sandwiched piece is flipped. With ``captures=False`` any empty
    cell is a legal target and nothing is flipped.
    """

    # Size of each axis is BASE_SIZE + number of players unless given
    BASE_SIZE = 6
    DEFAULT_PLAYERS = ("B", "W")

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 players: Sequence[str] = DEFAULT_PLAYERS, captures: bool = True):
        """
        Initialize a new board with the starting pattern in the centre.

        Args:
            width: Number of columns (default: 6 + number of players)
            height: Number of rows (default: 6 + number of players)
            players: Player ids in turn order
            captures: Whether to play with the sandwich rule

        Raises:
            ConfigurationError: If fewer than two distinct players are given, or
                the starting pattern does not fit on the grid
        """
        player_ids = list(players)
        if len(player_ids) < 2:
            raise ConfigurationError("At least two players are required")
        if len(set(player_ids)) != len(player_ids):
            raise ConfigurationError(f"Player ids must be distinct, got {player_ids}")

        default_size = self.BASE_SIZE + len(player_ids)
        self._width = default_size if width is None else width
        self._height = default_size if height is None else height
        if self._width < 1 or self._height < 1:
            raise ConfigurationError(
                f"Grid size must be positive, got {self._width}x{self._height}")

        self._players: Tuple[Player, ...] = tuple(Player(pid) for pid in player_ids)
        self._captures = captures
        self._grid: Dict[Coord, Cell] = {}
        self._turns: List[Turn] = []
        self._valid_coords: Optional[FrozenSet[Coord]] = None

        self._seed()
        logger.info("Created %dx%d board for players %s (captures=%s)",
                    self._width, self._height, ",".join(player_ids), captures)

    @classmethod
    def from_config(cls, config) -> 'Board':
        """Create a board from a GameConfig."""
        return cls(width=config.width, height=config.height,
                   players=config.players, captures=config.captures)

    def _seed(self) -> None:
        """
        Place the starting pattern: an n x n block in the middle of the grid,
        where n is the number of players. Ownership rotates through the roster
        along each row and column, offset by one so the first mover does not
        own the block's top-left cell.
        """
        n = len(self._players)
        origin_x = (self._width - n) // 2 + 1
        origin_y = (self._height - n) // 2 + 1
        for dy in range(n):
            for dx in range(n):
                coord = Coord(origin_x + dx, origin_y + dy)
                player = self._players[(dx + dy + 1) % n]
                if not self._set_cell(coord, player):
                    raise ConfigurationError(
                        f"Starting cell {coord} does not fit on a "
                        f"{self._width}x{self._height} grid")

    # Properties

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def captures(self) -> bool:
        return self._captures

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    @property
    def turns(self) -> Tuple[Turn, ...]:
        """The move history, oldest first."""
        return tuple(self._turns)

    # Cells

    def _in_grid(self, coord: Coord) -> bool:
        return 1 <= coord.x <= self._width and 1 <= coord.y <= self._height

    def _set_cell(self, coord: Coord, player: Player) -> Result:
        if not self._in_grid(coord):
            return Result.failure(ErrorKind.COORD_OUT_OF_RANGE)
        self._grid[coord] = Cell(player)
        self._valid_coords = None
        return Result.success()

    def get_cell(self, coord: Tuple[int, int]) -> Result:
        """
        Look up what occupies a coordinate.

        Returns:
            Result holding the Cell, or None for an empty cell. Fails with
            COORD_OUT_OF_RANGE outside the grid.
        """
        coord = Coord(*coord)
        if not self._in_grid(coord):
            return Result.failure(ErrorKind.COORD_OUT_OF_RANGE)
        return Result.success(self._grid.get(coord))

    def cells(self) -> Iterator[Tuple[Coord, Cell]]:
        """Iterate over occupied coordinates in row-major order."""
        for coord in sorted(self._grid, key=lambda c: (c.y, c.x)):
            yield coord, self._grid[coord]

    # Turn order

    def get_current_player(self) -> Result:
        """
        Get the player whose turn it is.

        Never fails at present; GAME_FINISHED is reserved for a finished game,
        which the engine does not detect.
        """
        if not self._turns:
            return Result.success(self._players[0])
        last_index = self._players.index(self._turns[-1].player)
        return Result.success(self._players[(last_index + 1) % len(self._players)])

    # Legal moves

    def get_next_valid_coords(self) -> Result:
        """
        Get every coordinate where the current player may place a piece.

        Returns:
            Result holding a list of Coord sorted by (x, y), or PLAYER_GET_ERROR
            if the current player cannot be resolved.
        """
        player_result = self.get_current_player()
        if not player_result:
            return Result.failure(ErrorKind.PLAYER_GET_ERROR, cause=player_result)
        return Result.success(sorted(self._legal_coords(player_result.value)))

    def _legal_coords(self, player: Player) -> FrozenSet[Coord]:
        # Every mutation clears the cache, and the current player only changes
        # when a turn is appended, so a cached set always belongs to ``player``.
        if self._valid_coords is None:
            self._valid_coords = frozenset(self._compute_valid_coords(player))
        return self._valid_coords

    def _compute_valid_coords(self, player: Player) -> Iterator[Coord]:
        if not self._captures:
            for y in range(1, self._height + 1):
                for x in range(1, self._width + 1):
                    coord = Coord(x, y)
                    if coord not in self._grid:
                        yield coord
            return

        for origin, cell in list(self._grid.items()):
            if cell.player != player:
                continue
            for direction in DIRECTIONS:
                target = self._walk_to_empty(origin, direction, player)
                if target is not None:
                    yield target

    def _walk_to_empty(self, origin: Coord, direction: Tuple[int, int],
                       player: Player) -> Optional[Coord]:
        """
        Walk from one of ``player``'s pieces across opposing pieces.

        Returns the empty coordinate the walk reaches if at least one opposing
        piece was crossed, otherwise None.
        """
        crossed = False
        coord = origin.step(direction)
        while self._in_grid(coord):
            cell = self._grid.get(coord)
            if cell is None:
                return coord if crossed else None
            if cell.player == player:
                return None
            crossed = True
            coord = coord.step(direction)
        return None

    def _captured_by(self, origin: Coord, player: Player) -> List[Coord]:
        """Collect opposing pieces sandwiched between ``origin`` and ``player``'s pieces."""
        captured = []
        for direction in DIRECTIONS:
            line = []
            coord = origin.step(direction)
            while self._in_grid(coord):
                cell = self._grid.get(coord)
                if cell is None:
                    break
                if cell.player == player:
                    captured.extend(line)
                    break
                line.append(coord)
                coord = coord.step(direction)
        return captured

    # Moves

    def next(self, coord: Tuple[int, int]) -> Result:
        """
        Place the current player's piece and flip everything it sandwiches.

        Args:
            coord: Target (x, y), 1-based

        Returns:
            An empty successful Result, or a failure:
            NOT_VALID_COORD if the target is not legal (capture variant),
            CELL_GET_ERROR / CELL_OCCUPIED if it is off the grid or taken
            (reduced variant), PLAYER_GET_ERROR or CELL_SET_ERROR on
            internal failures. The board is unchanged after any failure.
        """
        coord = Coord(*coord)

        player_result = self.get_current_player()
        if not player_result:
            return Result.failure(ErrorKind.PLAYER_GET_ERROR, cause=player_result)
        player = player_result.value

        if self._captures:
            if coord not in self._legal_coords(player):
                logger.debug("Rejected %s: not a valid coordinate", coord)
                return Result.failure(ErrorKind.NOT_VALID_COORD)
        else:
            cell_result = self.get_cell(coord)
            if not cell_result:
                logger.debug("Rejected %s: outside the grid", coord)
                return Result.failure(ErrorKind.CELL_GET_ERROR, cause=cell_result)
            if cell_result.value is not None:
                logger.debug("Rejected %s: cell occupied", coord)
                return Result.failure(ErrorKind.CELL_OCCUPIED)

        set_result = self._set_cell(coord, player)
        if not set_result:
            return Result.failure(ErrorKind.CELL_SET_ERROR, cause=set_result)

        flipped = self._captured_by(coord, player) if self._captures else []
        for captured in flipped:
            self._set_cell(captured, player).unwrap()

        self._turns.append(Turn(player, coord))
        self._valid_coords = None
        next_player = self.get_current_player().value
        self._legal_coords(next_player)

        logger.debug("Turn %d: %s played %s, flipped %d",
                     len(self._turns), player, coord, len(flipped))
        return Result.success()

    # Views

    def get_board_state(self) -> np.ndarray:
        """
        Get the board as a numpy array.

        Returns:
            Array of shape (height, width) indexed [y - 1, x - 1]; 0 marks an
            empty cell and k marks the k-th player in the roster
        """
        state = np.zeros((self._height, self._width), dtype=int)
        index = {player: i + 1 for i, player in enumerate(self._players)}
        for coord, cell in self._grid.items():
            state[coord.y - 1, coord.x - 1] = index[cell.player]
        return state

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        return copy.deepcopy(self)

    def __str__(self) -> str:
        rows = []
        for y in range(1, self._height + 1):
            row = []
            for x in range(1, self._width + 1):
                cell = self._grid.get(Coord(x, y))
                row.append(cell.player.id if cell else '.')
            rows.append(' '.join(row))

        status = ["\n".join(rows)]
        status.append(f"Current player: {self.get_current_player().value}")
        return "\n".join(status)

    def __repr__(self) -> str:
        return (f"Board(width={self._width}, height={self._height}, "
                f"players={[p.id for p in self._players]}, captures={self._captures}, "
                f"turns={len(self._turns)})")
