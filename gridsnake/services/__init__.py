"""
Scheduling and driver services for gridsnake.
"""

from .scheduler import FixedTickScheduler, LockstepScheduler
from .runner import run_game

__all__ = ['FixedTickScheduler', 'LockstepScheduler', 'run_game']
