"""tick-fakeclock - Virtual time and fake setTimeout/setInterval for tests."""
from __future__ import annotations

from tick_fakeclock.clock import FakeClock
from tick_fakeclock.config import PatchConfig
from tick_fakeclock.patch import OriginalTimers, SchedulerPatch
from tick_fakeclock.registry import TimerRegistry
from tick_fakeclock.testing import fake_timer, use_fake_timer
from tick_fakeclock.types import (
    Callback,
    InvalidAdvanceError,
    InvalidIntervalError,
    Interval,
    Timeout,
    Timer,
    TimerId,
)

__all__ = [
    "Callback",
    "FakeClock",
    "InvalidAdvanceError",
    "InvalidIntervalError",
    "Interval",
    "OriginalTimers",
    "PatchConfig",
    "SchedulerPatch",
    "Timeout",
    "Timer",
    "TimerId",
    "TimerRegistry",
    "fake_timer",
    "use_fake_timer",
]
