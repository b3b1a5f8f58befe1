"""Fixed-interval tick scheduler driven by elapsed host time."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class TimerHandle:
    """A pending one-shot callback; :meth:`cancel` is idempotent."""

    __slots__ = ("due_ms", "callback", "cancelled")

    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ClockScheduler:
    """Single-threaded timer that fires callbacks as time is fed in.

    The host calls :meth:`advance` with the milliseconds that elapsed
    since the previous call (a frame clock in a window, or arbitrary steps
    in tests). Ticks and one-shot callbacks fire in due order, one at a
    time, so a tick never overlaps another. :meth:`stop` takes effect
    immediately, even from inside a tick callback.
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self._interval_ms = 0
        self._callback: Callable[[], None] | None = None
        self._next_tick_ms: int | None = None
        self._timers: list[tuple[int, int, TimerHandle]] = []
        self._seq = itertools.count()

    @property
    def running(self) -> bool:
        return self._next_tick_ms is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        """Begin ticking every *interval_ms*, replacing any previous tick."""
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive.")
        self._interval_ms = interval_ms
        self._callback = callback
        self._next_tick_ms = self.now_ms + interval_ms

    def stop(self) -> None:
        """Stop ticking. Safe to call when already stopped."""
        if self._next_tick_ms is None:
            logger.debug("Scheduler already stopped.")
        self._next_tick_ms = None
        self._callback = None

    def call_later(
        self, delay_ms: int, callback: Callable[[], None],
    ) -> TimerHandle:
        """Run *callback* once, *delay_ms* from now."""
        handle = TimerHandle(self.now_ms + max(0, delay_ms), callback)
        heapq.heappush(self._timers, (handle.due_ms, next(self._seq), handle))
        return handle

    def advance(self, elapsed_ms: int) -> int:
        """Move the clock forward, firing everything that falls due.

        Returns the number of ticks fired.
        """
        target = self.now_ms + max(0, elapsed_ms)
        ticks = 0
        while True:
            timer_due = self._timers[0][0] if self._timers else None
            tick_due = self._next_tick_ms

            candidates = [t for t in (tick_due, timer_due) if t is not None]
            if not candidates or min(candidates) > target:
                break

            # One-shot timers due at the same instant run before the tick.
            if timer_due is not None and (tick_due is None or timer_due <= tick_due):
                _, _, handle = heapq.heappop(self._timers)
                self.now_ms = handle.due_ms
                if not handle.cancelled:
                    handle.callback()
                continue

            self.now_ms = tick_due
            self._next_tick_ms = tick_due + self._interval_ms
            ticks += 1
            callback = self._callback
            if callback is not None:
                callback()

        self.now_ms = target
        return ticks
