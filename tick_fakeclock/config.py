"""Patch configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tick_fakeclock import timers


@dataclass(frozen=True)
class PatchConfig:
    """Where the ambient scheduling functions live and what they are called.

    Attributes:
        target: Module or object whose attributes are swapped.
        set_timeout: Attribute name of the schedule-once slot.
        clear_timeout: Attribute name of the cancel-once slot.
        set_interval: Attribute name of the schedule-repeating slot.
        clear_interval: Attribute name of the cancel-repeating slot.
    """

    target: Any = timers
    set_timeout: str = "set_timeout"
    clear_timeout: str = "clear_timeout"
    set_interval: str = "set_interval"
    clear_interval: str = "clear_interval"

    def slot_names(self) -> tuple[str, str, str, str]:
        return (self.set_timeout, self.clear_timeout, self.set_interval, self.clear_interval)
