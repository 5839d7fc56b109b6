"""Application layer - use cases and port definitions.

Contains the showcase use case that orchestrates the domain demonstrations
and the port protocols that adapter implementations satisfy.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.showcase` - Fixed sequence of functional demonstrations
"""

from __future__ import annotations

from .ports import DisplayConfig, GetConfig, InitLogging, MonotonicClock
from .showcase import DemoLine, ShowcaseReport, run_showcase

__all__ = [
    "DemoLine",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "MonotonicClock",
    "ShowcaseReport",
    "run_showcase",
]
