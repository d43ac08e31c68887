"""
Tick scheduling for the fixed movement cadence.

The driver loop asks the scheduler, once per frame, how many fixed ticks
are due. Schedulers never call into the game themselves.
"""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class LockstepScheduler:
    """One tick per frame. Used for headless runs and replays."""

    def start(self) -> None:
        pass

    def due_ticks(self) -> int:
        return 1


class FixedTickScheduler:
    """
    Accumulates wall-clock time and releases one tick per elapsed interval.

    Attributes:
        interval: seconds between ticks
        clock: monotonic time source, injectable for tests
        max_catch_up: upper bound on ticks released in one frame; excess
            time is dropped so a stalled frame does not replay a burst
    """

    def __init__(
        self,
        interval: float,
        clock: Callable[[], float] = time.monotonic,
        max_catch_up: Optional[int] = 5
    ):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.interval = interval
        self.clock = clock
        self.max_catch_up = max_catch_up
        self._last: Optional[float] = None
        self._accumulator = 0.0

    def start(self) -> None:
        self._last = self.clock()
        self._accumulator = 0.0

    def due_ticks(self) -> int:
        if self._last is None:
            self.start()
            return 0

        now = self.clock()
        self._accumulator += max(0.0, now - self._last)
        self._last = now

        ticks = int(self._accumulator // self.interval)
        self._accumulator -= ticks * self.interval

        if self.max_catch_up is not None and ticks > self.max_catch_up:
            logger.warning("Dropping %d late ticks", ticks - self.max_catch_up)
            ticks = self.max_catch_up
        return ticks

    def time_until_next_tick(self) -> float:
        return max(0.0, self.interval - self._accumulator)
