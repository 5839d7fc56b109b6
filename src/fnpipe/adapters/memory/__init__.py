"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that run entirely in
memory -- no filesystem, no logging framework, no wall clock.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.clock` - Deterministic step clock
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .clock import StepClock
from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from fnpipe.application.ports import DisplayConfig, GetConfig, InitLogging, MonotonicClock

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_clock: MonotonicClock = StepClock()

__all__ = [
    "StepClock",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
