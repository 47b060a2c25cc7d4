"""Tracking of the display's rotation angle from a once-per-half-turn sync signal."""

from __future__ import annotations

from typing import Callable

ROTATION_PRECISION = 30
ROTATION_FULL = 1 << ROTATION_PRECISION
ROTATION_HALF = 1 << (ROTATION_PRECISION - 1)
ROTATION_MASK = ROTATION_FULL - 1

_U32 = 0xFFFFFFFF
_HISTORY = 8
_MIN_HALF_PERIOD = 10_000
_MAX_HALF_PERIOD = 10_000_000
_STOPPED_AFTER = 1_000_000
_MIN_PERIOD = 10_000


class RotationTracker:
    """Estimates the current angle by integrating speed between sync edges.

    ``clock`` returns a free-running microsecond counter (wrapping at 32 bits);
    ``sync_pin`` returns the current level of the spin sensor. Angles are
    fixed point, with ``ROTATION_FULL`` units per revolution.
    """

    def __init__(
        self,
        clock: Callable[[], int],
        sync_pin: Callable[[], int],
        zero_degrees: int = 0,
    ):
        self._clock = clock
        self._sync_pin = sync_pin
        self.zero = (ROTATION_FULL // 360 * zero_degrees) & ROTATION_MASK
        self.stopped = True
        self.period_raw = 0
        self.period = 1 << 26
        self.lock = True
        self.drift = 0
        self._sync_prev = 0
        self._sync_level = 0
        self._angle = 0
        self._delta = 256
        self._tick_prev = 0
        self._history = [0] * _HISTORY
        self._current = 0

    def median_period(self) -> int:
        """Full-turn period from the median of the recent half-turn times."""
        ordered = sorted(self._history)
        return ordered[(_HISTORY - 1) // 2] + ordered[_HISTORY // 2]

    def _on_edge(self, sync: int, elapsed: int, tick: int) -> None:
        self._sync_level = sync
        self._sync_prev = tick
        self.period_raw = (elapsed * 2) & _U32
        if not _MIN_HALF_PERIOD < elapsed < _MAX_HALF_PERIOD:
            return

        self._current = (self._current + 1) % _HISTORY
        self._history[self._current] = elapsed
        self.period = max(_MIN_PERIOD, self.median_period())

        self._delta = ROTATION_FULL // self.period
        if self.lock:
            offset = (self._angle + (0 if sync else ROTATION_HALF)) & ROTATION_MASK
            recentre = (offset - ROTATION_HALF) >> 17
            limit = self._delta // 16
            recentre = max(-limit, min(limit, recentre))
            self._delta -= recentre

    def current_angle(self) -> int:
        """Sample the clock and sync pin, and return the display angle."""
        tick = self._clock() & _U32
        elapsed = (tick - self._sync_prev) & _U32

        sync = 1 if self._sync_pin() else 0
        if sync != self._sync_level:
            self._on_edge(sync, elapsed, tick)

        self.stopped = elapsed > _STOPPED_AFTER

        dtick = (tick - self._tick_prev) & _U32
        self._tick_prev = tick

        self._angle = (self._angle + dtick * self._delta) & ROTATION_MASK
        self.zero = (self.zero + ROTATION_FULL + dtick * self.drift) & ROTATION_MASK

        return (self._angle + self.zero) & ROTATION_MASK