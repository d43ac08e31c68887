"""
gridsnake - a deterministic, fixed-tick grid snake simulation.
"""

from .config import GameConfig
from .domain import (
    Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    WorldBounds, Snake, FoodPlacer, GameState,
)
from .engine import GameSession, death_reason, is_dead, try_eat
from .errors import GridSnakeError, InvariantViolation

__all__ = [
    'GameConfig',
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'WorldBounds', 'Snake', 'FoodPlacer', 'GameState',
    'GameSession', 'death_reason', 'is_dead', 'try_eat',
    'GridSnakeError', 'InvariantViolation',
]

__version__ = "0.1.0"
