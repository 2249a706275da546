"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable, Optional


class TimeManager:
    """Tracks the time between frames and the total time elapsed."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._last = self._clock()
        self.delta_time = 0.0
        self.total_time = 0.0

    def update(self) -> float:
        """Advance one frame and return the seconds since the previous one."""
        now = self._clock()
        self.delta_time = now - self._last
        self._last = now
        self.total_time += self.delta_time
        return self.delta_time