"""Per-test wiring of a FakeClock and its SchedulerPatch."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from tick_fakeclock.clock import FakeClock
from tick_fakeclock.config import PatchConfig
from tick_fakeclock.patch import SchedulerPatch


def use_fake_timer(config: PatchConfig | None = None) -> tuple[FakeClock, SchedulerPatch]:
    """Return a fresh clock and an inactive patch bound to it.

    The caller pairs ``patch.activate()`` with ``patch.restore()``.
    """
    clock = FakeClock()
    return clock, SchedulerPatch(clock, config)


@contextmanager
def fake_timer(config: PatchConfig | None = None) -> Iterator[FakeClock]:
    """Activate a fake clock for the duration of the block.

    On exit the clock is reset and the ambient functions restored, also
    when the block raises.
    """
    clock, patch = use_fake_timer(config)
    patch.activate()
    try:
        yield clock
    finally:
        clock.reset()
        patch.restore()
