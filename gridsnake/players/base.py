"""
Base player interface for the game engine.
"""

from typing import Optional

from ..domain.constants import Direction
from ..domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    A player resolves the current directional intent from a snapshot of
    the game. It never touches the session directly.
    """

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of the Direction members, or None for no input this frame
        """
        raise NotImplementedError
