"""
Exceptions raised by gridsnake.

Game conditions (hitting a wall, running into the body) are never raised;
they end the game. The classes here signal programming defects.
"""


class GridSnakeError(Exception):
    """Base class for gridsnake errors."""


class InvariantViolation(GridSnakeError):
    """A simulation invariant was broken. The game instance is unusable."""
