"""
Snake entity for the game engine.
"""

import logging
from collections import deque
from typing import List, Optional, Tuple

from ..errors import InvariantViolation
from .constants import Direction, RIGHT

logger = logging.getLogger(__name__)

MIN_LENGTH = 2


class Snake:
    """
    Represents the snake on the board.

    The chain order is the anatomical order: index 0 is the head, the
    following entries run from the neck to the tail.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: current heading, read once per movement tick
        alive: whether this snake is still alive
        death_reason: 'wall' or 'self'
        death_tick: the tick number when the snake died
    """

    def __init__(self, positions: List[Tuple[int, int]], direction: Direction = RIGHT):
        if len(positions) < MIN_LENGTH:
            raise InvariantViolation(
                f"A snake needs at least {MIN_LENGTH} segments, got {len(positions)}."
            )
        for (ax, ay), (bx, by) in zip(positions, positions[1:]):
            if abs(ax - bx) + abs(ay - by) != 1:
                raise InvariantViolation(
                    f"Segments {(ax, ay)} and {(bx, by)} are not adjacent."
                )

        self.positions = deque(tuple(p) for p in positions)
        self.direction = Direction.parse(direction)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @classmethod
    def spawn(cls, head: Tuple[int, int], direction: Direction = RIGHT) -> "Snake":
        """Create a snake with one body segment trailing one cell behind the head."""
        direction = Direction.parse(direction)
        bx, by = direction.opposite.delta
        hx, hy = head
        return cls([(hx, hy), (hx + bx, hy + by)], direction)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def body(self) -> List[Tuple[int, int]]:
        """Body segments from neck to tail."""
        return list(self.positions)[1:]

    def __len__(self) -> int:
        return len(self.positions)

    def set_direction(self, requested: Direction) -> bool:
        """
        Update the heading unless the request reverses it.

        A reversal is ignored without error. Several calls between ticks
        overwrite each other, each checked against the heading stored at
        call time.

        Returns:
            True if the heading now equals the request.
        """
        requested = Direction.parse(requested)
        if requested is self.direction.opposite:
            logger.debug("Ignoring reversal %s while heading %s", requested.value, self.direction.value)
            return False
        self.direction = requested
        return True

    def advance(self) -> Tuple[int, int]:
        """
        Move the head one cell along the heading; every body segment takes
        the cell its predecessor held before the move.

        Returns:
            The head position before the move.
        """
        previous_head = self.head
        dx, dy = self.direction.delta
        new_head = (previous_head[0] + dx, previous_head[1] + dy)

        # Shifting the chain by one: the neck lands on the old head and the
        # old tail cell is vacated.
        self.positions.appendleft(new_head)
        self.positions.pop()
        logger.debug("Snake moved %s to %s", self.direction.value, new_head)
        return previous_head

    def grow(self, cell: Tuple[int, int]) -> None:
        """Append a new tail segment at the given cell."""
        self.positions.append(tuple(cell))

    def occupies(self, cell: Tuple[int, int]) -> bool:
        return tuple(cell) in self.positions

    def check_invariants(self, previous_length: Optional[int] = None) -> None:
        """
        Raises:
            InvariantViolation: If the chain is shorter than two cells or
                shorter than it was before.
        """
        length = len(self.positions)
        if length < MIN_LENGTH:
            raise InvariantViolation(f"Snake length dropped to {length}.")
        if previous_length is not None and length < previous_length:
            raise InvariantViolation(
                f"Snake length decreased from {previous_length} to {length}."
            )
