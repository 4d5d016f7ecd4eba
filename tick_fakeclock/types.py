"""Timer records, type aliases and errors for the fake clock."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

TimerId = int
Callback = Callable[[], None]


@dataclass(frozen=True, slots=True)
class Timeout:
    """One-shot timer. Fires once when current time reaches due_time."""

    id: TimerId
    callback: Callback
    due_time: int


@dataclass(frozen=True, slots=True)
class Interval:
    """Repeating timer. Fires every `period` ms until canceled."""

    id: TimerId
    callback: Callback
    period: int


Timer = Union[Timeout, Interval]


class InvalidIntervalError(ValueError):
    """Raised when a repeating timer is scheduled with a period below 1 ms."""

    def __init__(self, period: object) -> None:
        self.period = period
        if not isinstance(period, int):
            super().__init__(f"interval must be a whole number of ms, got {period!r}")
        else:
            super().__init__(f"interval must be at least 1 ms, got {period}")


class InvalidAdvanceError(ValueError):
    """Raised when virtual time would move backwards or by a non-integer amount."""
