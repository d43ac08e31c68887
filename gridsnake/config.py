"""
Static game configuration.

Values are read once when a game is created. GameConfig.from_env() reads
SNAKE_* variables (a .env file found from the working directory is loaded first) and falls back to the
defaults in domain.constants.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from .domain.bounds import WorldBounds
from .domain.constants import (
    CELL_SIZE,
    FRAME_SECONDS,
    INITIAL_DIRECTION,
    INITIAL_HEAD,
    TICK_SECONDS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Direction,
)


@dataclass(frozen=True)
class GameConfig:
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    cell_size: int = CELL_SIZE
    tick_seconds: float = TICK_SECONDS
    frame_seconds: float = FRAME_SECONDS
    initial_head: Tuple[int, int] = INITIAL_HEAD
    initial_direction: Direction = INITIAL_DIRECTION
    seed: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "initial_direction", Direction.parse(self.initial_direction))
        object.__setattr__(self, "initial_head", tuple(self.initial_head))

        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError(
                f"Window size must be positive, got {self.window_width}x{self.window_height}"
            )
        if self.window_width % self.cell_size or self.window_height % self.cell_size:
            raise ValueError(
                f"Window {self.window_width}x{self.window_height} is not a whole number "
                f"of {self.cell_size}px cells"
            )
        if self.tick_seconds <= 0 or self.frame_seconds <= 0:
            raise ValueError("tick_seconds and frame_seconds must be positive")

        bounds = self.bounds
        if bounds.half_width < 3 or bounds.half_height < 3:
            raise ValueError(
                f"Grid {self.grid_width}x{self.grid_height} is too small to place food"
            )

        hx, hy = self.initial_head
        nx, ny = self.initial_direction.opposite.delta
        for cell in ((hx, hy), (hx + nx, hy + ny)):
            if bounds.is_outside(cell):
                raise ValueError(f"Initial snake cell {cell} is outside the play-field")

    @property
    def grid_width(self) -> int:
        return self.window_width // self.cell_size

    @property
    def grid_height(self) -> int:
        return self.window_height // self.cell_size

    @property
    def bounds(self) -> WorldBounds:
        return WorldBounds.from_grid(self.grid_width, self.grid_height)

    @classmethod
    def from_env(cls, **overrides) -> "GameConfig":
        """
        Build a config from SNAKE_* environment variables.

        Keyword overrides that are not None take precedence over the
        environment.
        """
        load_dotenv(find_dotenv(usecwd=True))

        seed = os.getenv("SNAKE_SEED", "").strip()
        values = {
            "window_width": int(os.getenv("SNAKE_WINDOW_WIDTH", WINDOW_WIDTH)),
            "window_height": int(os.getenv("SNAKE_WINDOW_HEIGHT", WINDOW_HEIGHT)),
            "cell_size": int(os.getenv("SNAKE_CELL_SIZE", CELL_SIZE)),
            "tick_seconds": float(os.getenv("SNAKE_TICK_SECONDS", TICK_SECONDS)),
            "frame_seconds": float(os.getenv("SNAKE_FRAME_SECONDS", FRAME_SECONDS)),
            "initial_direction": os.getenv("SNAKE_INITIAL_DIRECTION", INITIAL_DIRECTION.value),
            "seed": int(seed) if seed else None,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
