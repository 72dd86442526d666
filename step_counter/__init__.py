from __future__ import annotations

from .counter import Counter, CounterState, create_counter
from .settings import Settings, load_settings

__all__ = (
    "Counter",
    "CounterState",
    "Settings",
    "create_counter",
    "load_settings",
)
