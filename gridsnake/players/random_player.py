"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from ..domain.bounds import WorldBounds
from ..domain.constants import Direction
from ..domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.

    Reversals are never proposed since the snake would ignore them.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]
        bounds = WorldBounds(game_state.half_width, game_state.half_height)

        candidates = [d for d in Direction if d is not game_state.direction.opposite]

        # Filter out moves that:
        # 1. Hit walls
        # 2. Hit own body (except tail, which will move)
        valid_moves: List[Direction] = []
        for move in candidates:
            dx, dy = move.delta
            new_cell = (head_x + dx, head_y + dy)
            if bounds.is_outside(new_cell):
                continue
            if new_cell in snake_positions[1:-1]:
                continue
            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(sorted(valid_moves))
