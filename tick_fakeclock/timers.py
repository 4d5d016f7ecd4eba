"""Real-time scheduling functions backed by daemon threads.

These module attributes are the ambient slots a SchedulerPatch swaps out.
Call them through the module (``timers.set_timeout(...)``) so a patch is
picked up at call time.
"""
from __future__ import annotations

import itertools
import logging
import threading

from tick_fakeclock.types import Callback, InvalidIntervalError, TimerId

logger = logging.getLogger(__name__)

_ids = itertools.count()
_lock = threading.Lock()
_handles: dict[TimerId, threading.Timer | _IntervalThread] = {}


class _IntervalThread(threading.Thread):
    """Calls `callback` every `period` seconds until canceled."""

    def __init__(self, callback: Callback, period: float) -> None:
        super().__init__(daemon=True)
        self._callback = callback
        self._period = period
        self._stopped = threading.Event()

    def cancel(self) -> None:
        self._stopped.set()

    def run(self) -> None:
        while not self._stopped.wait(self._period):
            try:
                self._callback()
            except Exception:
                logger.exception("interval callback raised, continuing")


def set_timeout(callback: Callback, delay_ms: int) -> TimerId:
    timer_id = next(_ids)

    def fire() -> None:
        with _lock:
            _handles.pop(timer_id, None)
        callback()

    handle = threading.Timer(max(0, delay_ms) / 1000, fire)
    handle.daemon = True
    with _lock:
        _handles[timer_id] = handle
    handle.start()
    logger.debug("real timeout %d started (%d ms)", timer_id, delay_ms)
    return timer_id


def set_interval(callback: Callback, period_ms: int) -> TimerId:
    if not isinstance(period_ms, int) or period_ms < 1:
        raise InvalidIntervalError(period_ms)
    timer_id = next(_ids)
    handle = _IntervalThread(callback, period_ms / 1000)
    with _lock:
        _handles[timer_id] = handle
    handle.start()
    logger.debug("real interval %d started (%d ms)", timer_id, period_ms)
    return timer_id


def _cancel(timer_id: TimerId | None) -> None:
    if timer_id is None:
        return
    with _lock:
        handle = _handles.pop(timer_id, None)
    if handle is not None:
        handle.cancel()
        logger.debug("real timer %d canceled", timer_id)


def clear_timeout(timer_id: TimerId | None) -> None:
    _cancel(timer_id)


def clear_interval(timer_id: TimerId | None) -> None:
    _cancel(timer_id)
