"""
Driver loop: interleaves frames and fixed ticks until the game ends.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..domain.game_state import GameState
from ..engine import GameSession
from ..players.base import Player
from .scheduler import LockstepScheduler

logger = logging.getLogger(__name__)


def run_game(
    session: GameSession,
    player: Player,
    scheduler=None,
    max_ticks: Optional[int] = None,
    max_frames: Optional[int] = None,
    sleep: Optional[Callable[[float], None]] = None,
    render: Optional[Callable[[GameState], None]] = None
) -> Dict[str, Any]:
    """
    Run a session to game over or until a limit is reached.

    Args:
        session: the game to drive
        player: resolves the directional intent each frame
        scheduler: decides how many ticks are due per frame; lockstep if None
        max_ticks: stop after this many ticks
        max_frames: stop after this many frames
        sleep: called with the frame interval between frames, e.g. time.sleep
        render: render sink, called with the snapshot after every frame

    Returns:
        A dictionary summarizing the game.
    """
    scheduler = scheduler or LockstepScheduler()
    scheduler.start()
    frames = 0

    while not session.game_over:
        if max_frames is not None and frames >= max_frames:
            break
        if max_ticks is not None and session.tick_number >= max_ticks:
            break

        intent = player.get_move(session.get_current_state())
        due = scheduler.due_ticks()
        if max_ticks is not None:
            due = min(due, max_ticks - session.tick_number)

        state = session.step(intent, due)
        frames += 1

        if render is not None:
            render(state)
        if sleep is not None and not session.game_over:
            sleep(session.config.frame_seconds)

    if not session.game_over:
        logger.info("Stopped game %s after %d ticks without a collision", session.game_id, session.tick_number)

    return {
        "game_id": session.game_id,
        "ticks": session.tick_number,
        "frames": frames,
        "length": len(session.snake),
        "foods_eaten": session.foods_eaten,
        "game_over": session.game_over,
        "death_reason": session.snake.death_reason,
        "death_tick": session.snake.death_tick,
    }
