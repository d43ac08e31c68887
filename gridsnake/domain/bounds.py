"""
World bounds in grid cells.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class WorldBounds:
    """
    Play-field limits centred on (0, 0).

    Attributes:
        half_width: a head with |x| >= half_width is on the wall
        half_height: a head with |y| >= half_height is on the wall
    """

    half_width: int
    half_height: int

    @classmethod
    def from_grid(cls, grid_width: int, grid_height: int) -> "WorldBounds":
        return cls(half_width=grid_width // 2, half_height=grid_height // 2)

    def is_outside(self, cell: Tuple[int, int]) -> bool:
        """True when the cell lies on or beyond the wall line."""
        x, y = cell
        return (
            x <= -self.half_width
            or x >= self.half_width
            or y <= -self.half_height
            or y >= self.half_height
        )

    @property
    def food_x_range(self) -> Tuple[int, int]:
        """Inclusive x range for food, one cell clear of the outermost playable column."""
        return -(self.half_width - 2), self.half_width - 2

    @property
    def food_y_range(self) -> Tuple[int, int]:
        return -(self.half_height - 2), self.half_height - 2
