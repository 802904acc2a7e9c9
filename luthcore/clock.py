"""Frame timing: delta time, time scale and frame counting."""

from __future__ import annotations

import time
from typing import Callable

_U32_MASK = 0xFFFFFFFF


class Clock:
    """Tracks time between frames using a monotonic timer in seconds."""

    def __init__(self, timer: Callable[[], float] = time.monotonic):
        self._timer = timer
        self._initialized = False
        self._start = 0.0
        self._last = 0.0
        self.time_scale = 1.0
        self.delta_time = 0.0
        self.unscaled_delta_time = 0.0
        self.frame_count = 0

    def update(self) -> None:
        """Advance one frame; the first call only starts the clock."""
        now = self._timer()
        if not self._initialized:
            self._start = now
            self._last = now
            self._initialized = True
            return
        self.unscaled_delta_time = now - self._last
        self.delta_time = self.unscaled_delta_time * self.time_scale
        self._last = now
        self.tick()

    def elapsed(self) -> float:
        """Seconds since the clock started."""
        return self._timer() - self._start

    def elapsed_ms(self) -> float:
        """Milliseconds since the clock started."""
        return self.elapsed() * 1000.0

    def tick(self) -> None:
        """Count one frame; the counter wraps at 32 bits."""
        self.frame_count = (self.frame_count + 1) & _U32_MASK