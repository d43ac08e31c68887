"""
Player implementations for gridsnake.

Players turn a snapshot of the game into a directional intent.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
]
