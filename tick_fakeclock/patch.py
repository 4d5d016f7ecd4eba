"""SchedulerPatch - swap ambient scheduling functions for a FakeClock."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Callable

from tick_fakeclock.clock import FakeClock
from tick_fakeclock.config import PatchConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OriginalTimers:
    """The four ambient functions as they were when the patch was built."""

    set_timeout: Callable[..., Any]
    clear_timeout: Callable[..., Any]
    set_interval: Callable[..., Any]
    clear_interval: Callable[..., Any]


class SchedulerPatch:
    """Rebinds the ambient scheduling slots to a FakeClock and back.

    The originals are captured once, at construction. Do not build a second
    patch against the same slots while one is active: it would capture the
    first patch's fakes as its originals.

    Usable as a context manager; ``restore()`` runs on every exit path.
    """

    def __init__(self, clock: FakeClock, config: PatchConfig | None = None) -> None:
        self.config: PatchConfig = config if config is not None else PatchConfig()
        self._clock = clock
        target = self.config.target
        self._original = OriginalTimers(
            *(getattr(target, name) for name in self.config.slot_names())
        )
        self._active = False

    @property
    def clock(self) -> FakeClock:
        return self._clock

    @property
    def original(self) -> OriginalTimers:
        return self._original

    @property
    def active(self) -> bool:
        return self._active

    def activate(self) -> None:
        self._bind(
            self._clock.set_timeout,
            self._clock.clear_timeout,
            self._clock.set_interval,
            self._clock.clear_interval,
        )
        self._active = True
        logger.debug("scheduler patch activated on %r", self.config.target)

    def restore(self) -> None:
        self._bind(
            self._original.set_timeout,
            self._original.clear_timeout,
            self._original.set_interval,
            self._original.clear_interval,
        )
        self._active = False
        logger.debug("scheduler patch restored on %r", self.config.target)

    def _bind(self, *fns: Callable[..., Any]) -> None:
        target = self.config.target
        for name, fn in zip(self.config.slot_names(), fns):
            setattr(target, name, fn)

    def __enter__(self) -> FakeClock:
        self.activate()
        return self._clock

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.restore()
