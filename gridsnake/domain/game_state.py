"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple

from .constants import Direction


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: number of fixed ticks completed
        frame_number: number of frames completed
        snake_positions: list of (x, y), head first
        direction: heading at snapshot time
        food: (x, y) of the active food, or None
        alive: whether the snake is still alive
        death_reason: 'wall', 'self' or None
        foods_eaten: number of food cells consumed
        half_width, half_height: world bounds in cells
    """

    def __init__(
        self,
        tick_number: int,
        frame_number: int,
        snake_positions: List[Tuple[int, int]],
        direction: Direction,
        food: Optional[Tuple[int, int]],
        alive: bool,
        foods_eaten: int,
        half_width: int,
        half_height: int,
        death_reason: Optional[str] = None
    ):
        self.tick_number = tick_number
        self.frame_number = frame_number
        self.snake_positions = snake_positions
        self.direction = direction
        self.food = food
        self.alive = alive
        self.foods_eaten = foods_eaten
        self.half_width = half_width
        self.half_height = half_height
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = wall
        . = empty space
        F = food
        S = snake body
        H = snake head
        y grows upwards, so the top row is the largest y.
        """
        xs = range(-self.half_width, self.half_width + 1)
        ys = range(self.half_height, -self.half_height - 1, -1)
        body = set(self.snake_positions[1:])

        result = []
        for y in ys:
            row = []
            for x in xs:
                if abs(x) == self.half_width or abs(y) == self.half_height:
                    row.append('#')
                elif (x, y) == self.head:
                    row.append('H')
                elif (x, y) in body:
                    row.append('S')
                elif (x, y) == self.food:
                    row.append('F')
                else:
                    row.append('.')
            result.append(f"{y:3d} {''.join(row)}")

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, length={len(self.snake_positions)}, "
            f"food={self.food}, alive={self.alive}>"
        )
