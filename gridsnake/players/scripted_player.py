"""
Scripted player - replays a fixed list of intents, one per frame.
"""

from typing import Iterable, List, Optional

from ..domain.constants import Direction
from ..domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Returns the next scripted intent on each call and None once the
    script runs out. None entries in the script mean no input that frame.
    """

    def __init__(self, moves: Iterable[Optional[str]]):
        self.moves: List[Optional[Direction]] = [
            None if m is None or str(m).strip() in ("", "-") else Direction.parse(m)
            for m in moves
        ]
        self.index = 0

    @classmethod
    def from_string(cls, text: str) -> "ScriptedPlayer":
        """Parse a comma separated script such as 'UP,-,LEFT'."""
        return cls(part for part in text.split(",")) if text.strip() else cls([])

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        if self.index >= len(self.moves):
            return None
        move = self.moves[self.index]
        self.index += 1
        return move
