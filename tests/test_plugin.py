"""Tests for fake_timer, use_fake_timer and the pytest fixtures."""
from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from tick_fakeclock import FakeClock, PatchConfig, SchedulerPatch, timers
from tick_fakeclock.testing import fake_timer, use_fake_timer

pytest_plugins = ["tick_fakeclock.plugin"]

_REAL_SET_TIMEOUT = timers.set_timeout


class TestUseFakeTimer:
    """use_fake_timer setup-only pair."""

    def test_returns_clock_and_inactive_patch(self) -> None:
        """Returns a clock and a patch that is not yet active."""
        clock, patch = use_fake_timer()
        assert isinstance(clock, FakeClock)
        assert isinstance(patch, SchedulerPatch)
        assert patch.clock is clock
        assert patch.active is False
        assert timers.set_timeout is _REAL_SET_TIMEOUT

    def test_manual_activate_and_restore(self) -> None:
        """The caller controls activation and restoration."""
        clock, patch = use_fake_timer()
        patch.activate()
        assert timers.set_timeout == clock.set_timeout
        patch.restore()
        assert timers.set_timeout is _REAL_SET_TIMEOUT

    def test_accepts_config(self) -> None:
        """A PatchConfig is passed through to the patch."""
        ns = SimpleNamespace(
            set_timeout=Mock(),
            clear_timeout=Mock(),
            set_interval=Mock(),
            clear_interval=Mock(),
        )
        _, patch = use_fake_timer(PatchConfig(target=ns))
        assert patch.config.target is ns


class TestFakeTimerContext:
    """fake_timer context manager."""

    def test_activates_inside_block(self) -> None:
        """Ambient calls inside the block use the fake clock."""
        callback = Mock()
        with fake_timer() as clock:
            timers.set_timeout(callback, 100)
            clock.advance(100)
        assert callback.call_count == 1

    def test_resets_and_restores_on_exit(self) -> None:
        """Leaving the block resets the clock and restores timers."""
        with fake_timer() as clock:
            timers.set_interval(lambda: None, 10)
            clock.advance(30)
        assert clock.pending() == 0
        assert clock.current_time == 0
        assert timers.set_timeout is _REAL_SET_TIMEOUT

    def test_restores_when_block_raises(self) -> None:
        """Timers are restored even when the block fails."""
        with pytest.raises(AssertionError):
            with fake_timer():
                assert False
        assert timers.set_timeout is _REAL_SET_TIMEOUT


class TestFixtures:
    """fake_clock and fake_clock_manual pytest fixtures."""

    def test_fake_clock_is_active(self, fake_clock: FakeClock) -> None:
        """fake_clock is patched in for the whole test."""
        assert timers.set_timeout == fake_clock.set_timeout

        first = Mock()
        second = Mock()
        timers.set_timeout(first, 1000)
        timers.set_interval(second, 500)
        fake_clock.advance(1500)

        assert first.call_count == 1
        assert second.call_count == 3

    def test_fake_clock_fresh_per_test(self, fake_clock: FakeClock) -> None:
        """Each test gets a clock at time 0 with ids from 0."""
        assert fake_clock.current_time == 0
        assert fake_clock.pending() == 0
        assert timers.set_timeout(lambda: None, 1) == 0

    def test_manual_fixture_starts_inactive(
        self, fake_clock_manual: tuple[FakeClock, SchedulerPatch]
    ) -> None:
        """fake_clock_manual leaves activation to the test."""
        clock, patch = fake_clock_manual
        assert timers.set_timeout is _REAL_SET_TIMEOUT
        patch.activate()
        timers.set_timeout(lambda: None, 5)
        assert clock.pending() == 1

    def test_ambient_restored_between_tests(self) -> None:
        """Fixtures restore the real functions at teardown."""
        assert timers.set_timeout is _REAL_SET_TIMEOUT
