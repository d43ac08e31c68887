"""
Tests for the Snake entity: heading changes and movement.
"""

import os
import random
import sys
from collections import deque

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridsnake.domain import Direction, Snake, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from gridsnake.errors import InvariantViolation


class TestDirection:
    """Tests for the Direction enumeration."""

    def test_opposites(self):
        """Every direction has its geometric opposite."""
        assert UP.opposite is DOWN
        assert DOWN.opposite is UP
        assert LEFT.opposite is RIGHT
        assert RIGHT.opposite is LEFT

    def test_deltas_grow_y_upwards(self):
        """UP increases y, DOWN decreases it."""
        assert UP.delta == (0, 1)
        assert DOWN.delta == (0, -1)
        assert LEFT.delta == (-1, 0)
        assert RIGHT.delta == (1, 0)

    def test_parse_is_case_insensitive(self):
        """Direction.parse accepts names in any case."""
        assert Direction.parse("up") is UP
        assert Direction.parse(" Left ") is LEFT
        assert Direction.parse(RIGHT) is RIGHT

    def test_parse_unknown_raises(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError):
            Direction.parse("NORTH")

    def test_directions_compare_as_strings(self):
        """Directions stay compatible with plain move strings."""
        assert UP == "UP"
        assert VALID_MOVES == {"UP", "DOWN", "LEFT", "RIGHT"}


class TestSnakeInitialization:
    """Tests for creating snakes."""

    def test_spawn_places_neck_behind_head(self):
        """Snake.spawn puts one body segment opposite the heading."""
        snake = Snake.spawn((0, 0), RIGHT)
        assert list(snake.positions) == [(0, 0), (-1, 0)]
        assert snake.direction is RIGHT

        snake = Snake.spawn((2, 3), UP)
        assert list(snake.positions) == [(2, 3), (2, 2)]

    def test_initial_state(self):
        """A new snake is alive with no death info."""
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.alive is True
        assert snake.death_reason is None
        assert snake.death_tick is None
        assert snake.head == (5, 5)
        assert snake.body == [(4, 5), (3, 5)]
        assert len(snake) == 3

    def test_positions_is_deque(self):
        """Snake positions are stored as an ordered deque."""
        snake = Snake([(5, 5), (4, 5)])
        assert isinstance(snake.positions, deque)

    def test_single_segment_raises(self):
        """A chain shorter than two cells is rejected."""
        with pytest.raises(InvariantViolation):
            Snake([(0, 0)])

    def test_non_adjacent_segments_raise(self):
        """Segments must touch their neighbours."""
        with pytest.raises(InvariantViolation):
            Snake([(0, 0), (2, 0)])


class TestSetDirection:
    """Tests for heading changes."""

    @pytest.mark.parametrize("heading", list(Direction))
    def test_reversal_is_ignored(self, heading):
        """Requesting the opposite heading never changes it."""
        dx, dy = heading.opposite.delta
        snake = Snake([(0, 0), (dx, dy)], heading)

        assert snake.set_direction(heading.opposite) is False
        assert snake.direction is heading

    def test_turn_is_accepted(self):
        """A perpendicular turn replaces the heading."""
        snake = Snake.spawn((0, 0), RIGHT)
        assert snake.set_direction(UP) is True
        assert snake.direction is UP

    def test_same_direction_is_accepted(self):
        """Repeating the current heading is allowed."""
        snake = Snake.spawn((0, 0), RIGHT)
        assert snake.set_direction(RIGHT) is True
        assert snake.direction is RIGHT

    def test_last_valid_call_wins(self):
        """Each call is checked against the heading stored at call time."""
        snake = Snake.spawn((0, 0), RIGHT)
        snake.set_direction(UP)
        snake.set_direction(LEFT)
        assert snake.direction is LEFT

        snake = Snake.spawn((0, 0), RIGHT)
        snake.set_direction(UP)
        snake.set_direction(DOWN)
        assert snake.direction is UP


class TestAdvance:
    """Tests for chain movement."""

    def test_advance_moves_head_and_shifts_body(self):
        """The neck takes the old head cell and the tail cell is vacated."""
        snake = Snake([(5, 5), (4, 5), (3, 5)], RIGHT)
        previous_head = snake.advance()

        assert previous_head == (5, 5)
        assert list(snake.positions) == [(6, 5), (5, 5), (4, 5)]

    def test_advance_in_each_direction(self):
        """The head moves one cell along the heading."""
        expected = {UP: (0, 1), DOWN: (0, -1), LEFT: (-1, 0), RIGHT: (1, 0)}
        for heading, head in expected.items():
            snake = Snake.spawn((0, 0), heading)
            snake.advance()
            assert snake.head == head

    def test_advance_without_input_keeps_heading(self):
        """The snake keeps moving along its last heading."""
        snake = Snake.spawn((0, 0), UP)
        for _ in range(3):
            snake.advance()
        assert list(snake.positions) == [(0, 3), (0, 2)]

    def test_advance_preserves_length_and_order(self):
        """After each move, segment i holds the old cell of segment i - 1."""
        rng = random.Random(7)
        snake = Snake([(0, 0), (-1, 0), (-2, 0), (-3, 0), (-4, 0)], RIGHT)

        for _ in range(100):
            snake.set_direction(rng.choice(list(Direction)))
            before = list(snake.positions)
            snake.advance()
            after = list(snake.positions)

            assert len(after) == len(before)
            for i in range(1, len(after)):
                assert after[i] == before[i - 1]

    def test_grown_tail_follows_old_tail(self):
        """A segment appended on the head cell trails the old tail after the next move."""
        snake = Snake([(3, 3), (3, 2)], UP)
        snake.grow((3, 3))
        snake.advance()
        assert list(snake.positions) == [(3, 4), (3, 3), (3, 2)]


class TestInvariants:
    """Tests for chain invariant checks."""

    def test_check_passes_for_valid_chain(self):
        snake = Snake.spawn((0, 0), RIGHT)
        snake.check_invariants(previous_length=2)

    def test_short_chain_raises(self):
        """A chain that lost a segment below the minimum is a defect."""
        snake = Snake.spawn((0, 0), RIGHT)
        snake.positions.pop()
        with pytest.raises(InvariantViolation):
            snake.check_invariants()

    def test_shrinking_chain_raises(self):
        """The chain never gets shorter."""
        snake = Snake([(0, 0), (-1, 0), (-2, 0)], RIGHT)
        with pytest.raises(InvariantViolation):
            snake.check_invariants(previous_length=4)
