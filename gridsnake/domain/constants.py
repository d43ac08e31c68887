"""
Game constants for gridsnake.
"""

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Heading of the snake. Values are the plain move names."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step in grid cells; y grows upwards."""
        return _DELTAS[self]

    @classmethod
    def parse(cls, value) -> "Direction":
        """
        Resolve a Direction from a Direction or a case-insensitive name.

        Raises:
            ValueError: If the value does not name a direction.
        """
        if isinstance(value, Direction):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(
                f"Unknown direction {value!r}. Valid moves: {', '.join(sorted(VALID_MOVES))}"
            ) from None


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (0, 1),     # Up => y + 1
    Direction.DOWN: (0, -1),  # Down => y - 1
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Game settings
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
CELL_SIZE = 20
TICK_SECONDS = 0.1
FRAME_SECONDS = 1 / 60
INITIAL_HEAD = (0, 0)
INITIAL_DIRECTION = RIGHT
