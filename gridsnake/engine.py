"""
Game engine: collision detection, eating and the session that owns the
mutable game state.

A session is advanced by two explicit steps. tick() runs on the fixed
cadence (movement, then death detection). frame() runs on the variable
cadence (input, then eating, then food placement). step() chains them in
per-frame order for a driver loop.
"""

import logging
import uuid
from typing import Callable, List, Optional, Tuple

from .config import GameConfig
from .domain.bounds import WorldBounds
from .domain.constants import Direction
from .domain.food import FoodPlacer
from .domain.game_state import GameState
from .domain.snake import Snake
from .errors import InvariantViolation

logger = logging.getLogger(__name__)

WALL = "wall"
SELF = "self"


def death_reason(snake: Snake, bounds: WorldBounds) -> Optional[str]:
    """Return 'wall' or 'self' if the head position is fatal, else None."""
    head = snake.head
    if bounds.is_outside(head):
        return WALL
    if head in snake.body:
        return SELF
    return None


def is_dead(snake: Snake, bounds: WorldBounds) -> bool:
    return death_reason(snake, bounds) is not None


def try_eat(snake: Snake, food: Optional[Tuple[int, int]]) -> Tuple[Snake, bool]:
    """
    Grow the snake if its head is on the food.

    The new tail segment starts on the eaten cell, which is where the head
    currently is. It falls in behind the old tail on the next tick.
    """
    if food is None or snake.head != tuple(food):
        return snake, False
    snake.grow(food)
    return snake, True


class GameSession:
    """
    Owns the snake, the food and the bookkeeping for one game.

    Attributes:
        config: static configuration, read once
        bounds: world bounds derived from config
        snake: the snake chain and its heading
        food: active food cell, or None when it has been eaten
        tick_number: fixed ticks completed
        frame_number: frames completed
        foods_eaten: food cells consumed so far
        game_over: True once the terminal state is reached
        history: per-tick snapshots when keep_history is set
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        food_placer: Optional[FoodPlacer] = None,
        keep_history: bool = False,
        game_id: Optional[str] = None
    ):
        self.config = config or GameConfig()
        self.bounds = self.config.bounds
        self.snake = Snake.spawn(self.config.initial_head, self.config.initial_direction)
        self.food: Optional[Tuple[int, int]] = None
        self.food_placer = food_placer or FoodPlacer(self.bounds, seed=self.config.seed)

        self.tick_number = 0
        self.frame_number = 0
        self.foods_eaten = 0
        self.game_over = False
        self.keep_history = keep_history
        self.history: List[GameState] = []
        self._game_over_listeners: List[Callable[[], None]] = []

        self.game_id = game_id or str(uuid.uuid4())
        logger.debug("Game %s created with %dx%d grid", self.game_id,
                     self.config.grid_width, self.config.grid_height)

    def add_game_over_listener(self, listener: Callable[[], None]) -> None:
        """Register a callable invoked once, with no arguments, when the game ends."""
        self._game_over_listeners.append(listener)

    def set_direction(self, requested: Optional[Direction]) -> bool:
        """Apply a resolved directional intent. None means no input."""
        if requested is None or self.game_over:
            return False
        return self.snake.set_direction(requested)

    def tick(self) -> bool:
        """
        Run one fixed tick: move the snake, then check for death.

        Returns:
            False if the game was already over and nothing happened.
        """
        if self.game_over:
            logger.debug("Game %s is already over. No more ticks.", self.game_id)
            return False

        previous_length = len(self.snake)
        self.snake.advance()
        self.tick_number += 1
        self.snake.check_invariants(previous_length)

        reason = death_reason(self.snake, self.bounds)
        if reason is not None:
            self.end_game(reason)

        self.record_history()
        return True

    def frame(self, intent: Optional[Direction] = None) -> bool:
        """
        Run one variable-rate frame: apply input, resolve eating, then place
        food if none is active.

        Returns:
            True if food was eaten this frame.
        """
        if self.game_over:
            return False

        self.set_direction(intent)
        eaten = self.resolve_eat()
        if self.food is None:
            self.spawn_food()
        self.frame_number += 1
        return eaten

    def step(self, intent: Optional[Direction] = None, ticks: int = 0) -> GameState:
        """
        One pass of the driver loop: input, the ticks that are due, then
        eating and food placement. Returns the snapshot for rendering.
        """
        self.set_direction(intent)
        for _ in range(ticks):
            if not self.tick():
                break
        self.frame()
        return self.get_current_state()

    def resolve_eat(self) -> bool:
        previous_length = len(self.snake)
        _, consumed = try_eat(self.snake, self.food)
        if not consumed:
            return False

        if len(self.snake) != previous_length + 1:
            raise InvariantViolation(
                f"Eating changed length from {previous_length} to {len(self.snake)}."
            )
        logger.info("Food eaten at %s, snake length %d", self.food, len(self.snake))
        self.food = None
        self.foods_eaten += 1
        return True

    def spawn_food(self) -> Tuple[int, int]:
        """
        Raises:
            InvariantViolation: If food is still active.
        """
        if self.food is not None:
            raise InvariantViolation(f"Food is still active at {self.food}.")
        self.food = self.food_placer.spawn_food(self.snake.positions)
        logger.info("Food spawned at %s", self.food)
        return self.food

    def end_game(self, reason: str) -> None:
        if self.game_over:
            return
        self.game_over = True
        self.snake.alive = False
        self.snake.death_reason = reason
        self.snake.death_tick = self.tick_number
        logger.info(
            "Game Over: %s collision at %s on tick %d, length %d",
            reason, self.snake.head, self.tick_number, len(self.snake)
        )
        for listener in self._game_over_listeners:
            listener()

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            frame_number=self.frame_number,
            snake_positions=list(self.snake.positions),
            direction=self.snake.direction,
            food=self.food,
            alive=self.snake.alive,
            foods_eaten=self.foods_eaten,
            half_width=self.bounds.half_width,
            half_height=self.bounds.half_height,
            death_reason=self.snake.death_reason
        )

    def record_history(self) -> None:
        if self.keep_history:
            self.history.append(self.get_current_state())
