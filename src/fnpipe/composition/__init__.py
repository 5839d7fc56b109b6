"""Composition root: the only place that picks concrete adapters for the ports.

``build_production`` is what the console script and ``python -m fnpipe``
use; ``build_testing`` swaps in in-memory adapters and a step clock.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from ..adapters.clock import monotonic_ns
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import DisplayConfig, GetConfig, InitLogging, MonotonicClock

    # Structural checks of the production adapters, for pyright only.
    _production_ports: tuple[GetConfig, DisplayConfig, InitLogging, MonotonicClock] = (
        get_config,
        display_config,
        init_logging,
        monotonic_ns,
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """Port implementations handed to the CLI through ``ctx.obj``.

    Example:
        >>> services = build_testing()
        >>> services.with_clock(lambda: 0).clock()
        0
    """

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    clock: MonotonicClock

    def with_clock(self, clock: MonotonicClock) -> AppServices:
        """Return a copy that times the benchmark with ``clock``."""
        return replace(self, clock=clock)


def build_production() -> AppServices:
    """Layered config files, lib_log_rich, Rich display and ``perf_counter_ns``."""
    return AppServices(get_config, display_config, init_logging, monotonic_ns)


def build_testing(*, clock: MonotonicClock | None = None) -> AppServices:
    """In-memory config, no-op display and logging, deterministic clock.

    Args:
        clock: Benchmark clock; a fresh :class:`~fnpipe.adapters.memory.StepClock`
            when None. Pass your own to assert on how often it was read.
    """
    from ..adapters.memory import (
        StepClock,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config_in_memory,
        display_config_in_memory,
        init_logging_in_memory,
        StepClock() if clock is None else clock,
    )


__all__ = [
    "get_config",
    "AppServices",
    "build_production",
    "build_testing",
]
