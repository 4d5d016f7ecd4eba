"""FakeClock - virtual time and the timer firing algorithm."""
from __future__ import annotations

import logging

from tick_fakeclock.registry import TimerRegistry
from tick_fakeclock.types import (
    Callback,
    InvalidAdvanceError,
    InvalidIntervalError,
    Interval,
    Timeout,
    Timer,
    TimerId,
)

logger = logging.getLogger(__name__)


class FakeClock:
    """Virtual millisecond clock with setTimeout/setInterval-style scheduling.

    Time only moves when `advance` or `advance_to` is called. Callbacks run
    synchronously on the caller's stack, in registry insertion order.

    Example:
        clock = FakeClock()
        clock.set_timeout(lambda: print("done"), 1000)
        clock.advance(1000)  # prints "done"
    """

    def __init__(self) -> None:
        self._registry = TimerRegistry()
        self._current_time = 0
        self._next_id = 0

    @property
    def current_time(self) -> int:
        """Milliseconds of virtual time since construction or last reset."""
        return self._current_time

    # --- Scheduling ---

    def set_timeout(self, callback: Callback, delay_ms: int) -> TimerId:
        """Schedule `callback` to fire once, `delay_ms` from now.

        Negative delays are treated as 0.
        """
        timer_id = self._allocate_id()
        due_time = self._current_time + max(0, delay_ms)
        self._registry.add(Timeout(id=timer_id, callback=callback, due_time=due_time))
        logger.debug("timeout %d scheduled for t=%d", timer_id, due_time)
        return timer_id

    def set_interval(self, callback: Callback, period_ms: int) -> TimerId:
        """Schedule `callback` to fire every `period_ms`. Raises InvalidIntervalError if < 1."""
        if not isinstance(period_ms, int) or period_ms < 1:
            raise InvalidIntervalError(period_ms)
        timer_id = self._allocate_id()
        self._registry.add(Interval(id=timer_id, callback=callback, period=period_ms))
        logger.debug("interval %d scheduled every %d ms", timer_id, period_ms)
        return timer_id

    def cancel(self, timer_id: TimerId | None) -> None:
        """Remove a timer of either kind. Unknown or fired ids are ignored."""
        if timer_id is None:
            return
        if self._registry.remove(timer_id):
            logger.debug("timer %d canceled", timer_id)

    def clear_timeout(self, timer_id: TimerId | None) -> None:
        self.cancel(timer_id)

    def clear_interval(self, timer_id: TimerId | None) -> None:
        self.cancel(timer_id)

    # --- Time ---

    def advance(self, ms: int) -> None:
        """Move time forward by `ms` and fire everything due in that window.

        Each interval fires `ms // period` times; remainders are not carried
        into the next call. Timeouts fire once `current_time >= due_time`.
        Timers added by callbacks during this call wait for the next one.
        """
        _check_whole_ms(ms)
        if ms < 0:
            raise InvalidAdvanceError(f"cannot advance by a negative amount: {ms}")
        self._current_time += ms
        now = self._current_time
        fired = 0

        # Identity checks against the live registry: a timer canceled mid-pass
        # is skipped, and an id reissued after reset() is not this timer.
        for timer in self._registry.timers():
            if self._registry.get(timer.id) is not timer:
                continue
            if isinstance(timer, Interval):
                for _ in range(ms // timer.period):
                    if self._registry.get(timer.id) is not timer:
                        break
                    timer.callback()
                    fired += 1
            elif now >= timer.due_time:
                self._registry.remove(timer.id)
                timer.callback()
                fired += 1

        logger.debug("advanced %d ms to t=%d, %d callbacks fired", ms, now, fired)

    def advance_to(self, target_ms: int) -> None:
        """Advance to an absolute time. Raises InvalidAdvanceError if in the past."""
        _check_whole_ms(target_ms)
        if target_ms < self._current_time:
            raise InvalidAdvanceError(
                f"cannot advance to {target_ms}, current time is {self._current_time}"
            )
        self.advance(target_ms - self._current_time)

    # --- Inspection ---

    def instances(self) -> dict[TimerId, Timer]:
        """Return a snapshot of pending timers keyed by id."""
        return self._registry.items()

    def get_instance(self, timer_id: TimerId) -> Timer | None:
        return self._registry.get(timer_id)

    def pending(self) -> int:
        return len(self._registry)

    def reset(self) -> None:
        """Drop all timers and rewind time and ids to 0."""
        self._registry.clear()
        self._current_time = 0
        self._next_id = 0

    def _allocate_id(self) -> TimerId:
        timer_id = self._next_id
        self._next_id += 1
        return timer_id


def _check_whole_ms(ms: object) -> None:
    if not isinstance(ms, int):
        raise InvalidAdvanceError(f"time must be a whole number of ms, got {ms!r}")
