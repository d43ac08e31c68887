"""
Domain entities for the gridsnake simulation.

This module contains the core game entities that are independent of
scheduling and input concerns.
"""

from .constants import Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from .bounds import WorldBounds
from .snake import Snake
from .food import FoodPlacer
from .game_state import GameState

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'WorldBounds',
    'Snake',
    'FoodPlacer',
    'GameState',
]
