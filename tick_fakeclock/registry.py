"""TimerRegistry class."""
from __future__ import annotations

from tick_fakeclock.types import Timer, TimerId


class TimerRegistry:
    """Insertion-ordered store of pending timers keyed by id."""

    def __init__(self) -> None:
        self._timers: dict[TimerId, Timer] = {}

    def __len__(self) -> int:
        return len(self._timers)

    def __contains__(self, timer_id: object) -> bool:
        return timer_id in self._timers

    def add(self, timer: Timer) -> None:
        """Register a timer. Overwrites if the id exists."""
        self._timers[timer.id] = timer

    def get(self, timer_id: TimerId) -> Timer | None:
        return self._timers.get(timer_id)

    def remove(self, timer_id: TimerId) -> bool:
        """Remove a timer. Returns False if it was not registered."""
        return self._timers.pop(timer_id, None) is not None

    def timers(self) -> list[Timer]:
        """Return registered timers in insertion order, detached from the store."""
        return list(self._timers.values())

    def items(self) -> dict[TimerId, Timer]:
        """Return a shallow copy of the id -> timer mapping."""
        return dict(self._timers)

    def clear(self) -> None:
        self._timers.clear()
