"""pytest fixtures for fake timers.

Enable with ``pytest_plugins = ["tick_fakeclock.plugin"]``.
"""
from __future__ import annotations

from typing import Iterator

import pytest

from tick_fakeclock.clock import FakeClock
from tick_fakeclock.patch import SchedulerPatch
from tick_fakeclock.testing import fake_timer, use_fake_timer


@pytest.fixture
def fake_clock() -> Iterator[FakeClock]:
    """A FakeClock patched into tick_fakeclock.timers for one test."""
    with fake_timer() as clock:
        yield clock


@pytest.fixture
def fake_clock_manual() -> Iterator[tuple[FakeClock, SchedulerPatch]]:
    """Clock and patch left inactive; teardown still resets and restores."""
    clock, patch = use_fake_timer()
    try:
        yield clock, patch
    finally:
        clock.reset()
        patch.restore()
