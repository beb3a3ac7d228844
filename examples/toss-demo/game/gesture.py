"""Pointer velocity estimate for the release of a drag."""
from __future__ import annotations

from collections import deque

from tick_toss import vec
from tick_toss.vec import Vec2

# Only motion in the last WINDOW seconds counts toward the release velocity.
WINDOW = 0.1


class VelocityTracker:
    """Keeps recent (time, position) samples of the pointer."""

    def __init__(self, window: float = WINDOW) -> None:
        self._window = window
        self._samples: deque[tuple[float, Vec2]] = deque()

    def reset(self) -> None:
        self._samples.clear()

    def add(self, t: float, pos: Vec2) -> None:
        self._samples.append((t, pos))
        while self._samples and t - self._samples[0][0] > self._window:
            self._samples.popleft()

    def velocity(self) -> Vec2:
        """Units per second between the oldest and newest sample in the window."""
        if len(self._samples) < 2:
            return vec.ZERO
        t0, p0 = self._samples[0]
        t1, p1 = self._samples[-1]
        if t1 <= t0:
            return vec.ZERO
        return vec.scale(vec.sub(p1, p0), 1.0 / (t1 - t0))
