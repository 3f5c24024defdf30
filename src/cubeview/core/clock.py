"""Delta clock for frame timing."""

import time

from cubeview.constants import MAX_DELTA_TIME


class DeltaClock:
    """Tracks elapsed time between frames."""

    def __init__(self, max_delta: float = MAX_DELTA_TIME):
        self.max_delta = max_delta
        self._last_time = time.perf_counter()

    def get_delta(self) -> float:
        """Return seconds elapsed since last call, clamped to ``max_delta``."""
        now = time.perf_counter()
        dt = now - self._last_time
        self._last_time = now
        return min(dt, self.max_delta)

    def reset(self) -> None:
        self._last_time = time.perf_counter()
