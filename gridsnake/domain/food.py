"""
Food placement by rejection sampling.
"""

import logging
import random
from typing import Iterable, Optional, Tuple

from .bounds import WorldBounds

logger = logging.getLogger(__name__)


class FoodPlacer:
    """
    Draws food cells uniformly from the inner play-field.

    The random source is injectable so placement can be replayed: pass a
    seeded random.Random, or a seed.
    """

    def __init__(self, bounds: WorldBounds, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        self.bounds = bounds
        self.rng = rng if rng is not None else random.Random(seed)

        x_low, x_high = bounds.food_x_range
        y_low, y_high = bounds.food_y_range
        if x_low > x_high or y_low > y_high:
            raise ValueError(f"Bounds {bounds} leave no interior cell for food.")

    def random_cell(self) -> Tuple[int, int]:
        x_low, x_high = self.bounds.food_x_range
        y_low, y_high = self.bounds.food_y_range
        return (self.rng.randint(x_low, x_high), self.rng.randint(y_low, y_high))

    def spawn_food(self, occupied: Iterable[Tuple[int, int]]) -> Tuple[int, int]:
        """
        Return a random interior cell not in occupied.

        There is no retry cap: the loop ends as soon as a free cell is drawn,
        which assumes the snake does not cover the whole interior.
        """
        occupied = {tuple(cell) for cell in occupied}
        attempts = 1
        cell = self.random_cell()
        while cell in occupied:
            attempts += 1
            cell = self.random_cell()
        if attempts > 1:
            logger.debug("Food placed at %s after %d draws", cell, attempts)
        return cell
