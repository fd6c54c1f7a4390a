"""
Board coordinates and the text parser that produces them.
"""
from typing import NamedTuple, Tuple

from .result import ErrorKind, Result


class Coord(NamedTuple):
    """A 1-based (x, y) position on the board."""
    x: int
    y: int

    def step(self, direction: Tuple[int, int]) -> 'Coord':
        dx, dy = direction
        return Coord(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


# Every unit vector except (0, 0)
DIRECTIONS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if (dx, dy) != (0, 0)
)


def parse_coord(source: str) -> Result:
    """
    Parse an ``"x,y"`` string into a Coord.

    The result is not range checked; that is the board's job.

    Args:
        source: Raw text, e.g. ``"3,4"``. Whitespace around either number is ignored.

    Returns:
        Result holding a Coord, or a SOURCE_INVALID failure if a component is
        missing or not an integer.
    """
    parts = source.split(",")
    if len(parts) != 2:
        return Result.failure(ErrorKind.SOURCE_INVALID)

    x_string, y_string = (part.strip() for part in parts)
    if not (x_string and y_string):
        return Result.failure(ErrorKind.SOURCE_INVALID)

    try:
        x, y = int(x_string), int(y_string)
    except ValueError:
        return Result.failure(ErrorKind.SOURCE_INVALID)

    return Result.success(Coord(x, y))
