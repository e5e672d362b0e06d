"""Frame-rate limiting and measurement."""

from __future__ import annotations

import time
from collections.abc import Callable


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


class FpsController:
    """Caps the frame rate and measures the achieved one.

    ``clock`` returns the current time in whole milliseconds and ``sleep``
    waits for a number of milliseconds; both can be replaced for testing.
    """

    def __init__(
        self,
        clock: Callable[[], int] = _now_ms,
        sleep: Callable[[int], None] = _sleep_ms,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self.frame_time = 0
        self.update_interval = 0
        self._last_time = 0
        self._last_update = 0
        self._count = 0.0
        self._fps = 0.0

    @property
    def fps(self) -> float:
        """Most recently measured frames per second."""
        return self._fps

    def set_limit_rate(self, refresh_rate: float) -> None:
        """Set the maximum number of frames per second."""
        if refresh_rate <= 0:
            raise ValueError("refresh rate must be positive")
        self.frame_time = int(1000.0 / refresh_rate)

    def set_update_interval(self, interval: int) -> None:
        """Set how many milliseconds pass between frame-rate measurements."""
        self.update_interval = interval

    def limit(self) -> None:
        """Wait out the remainder of the current frame."""
        now = self._clock()
        wait = self.frame_time - (now - self._last_time)
        if wait > 0:
            self._sleep(wait)
        self._last_time = self._clock()

    def update(self) -> None:
        """Count a frame and refresh the measurement when the interval has passed."""
        now = self._clock()
        self._count += 1.0
        elapsed = now - self._last_update
        if self.update_interval < elapsed:
            self._fps = self._count / elapsed * 1000.0
            self._last_update = now
            self._count = 0.0