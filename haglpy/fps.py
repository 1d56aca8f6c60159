"""Smoothed frames-per-second counter."""

from __future__ import annotations

import time
from typing import Callable


class FpsCounter:
    """Measures rendering speed; call update() once after each flushed frame."""

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        smoothing: float = 0.98,
        tick: float = 1e-6,
    ) -> None:
        if not 0.0 <= smoothing <= 1.0:
            raise ValueError("smoothing must be between 0 and 1")
        if tick <= 0:
            raise ValueError("tick must be positive")
        self._clock = clock
        self._smoothing = smoothing
        self._tick = tick
        self._start: float | None = None
        self._frames = 1
        self._current = 0.0

    @property
    def current(self) -> float:
        """The most recent smoothed value."""
        return self._current

    def update(self) -> float:
        """Count a frame and return the smoothed frames per second."""
        if self._start is None:
            self._start = self._clock() - self._tick
        self._frames += 1
        elapsed = self._clock() - self._start
        measured = self._frames / elapsed
        self._current = measured * self._smoothing + self._current * (1.0 - self._smoothing)
        return self._current