"""Adapters layer - infrastructure and framework integrations.

Connects the application to the outside world (CLI, configuration,
logging, clock).

Contents:
    * :mod:`.cli` - rich-click CLI framework integration
    * :mod:`.config` - Configuration loading, overrides, and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.clock` - Monotonic nanosecond clock
    * :mod:`.memory` - In-memory implementations for tests
"""

from __future__ import annotations

__all__: list[str] = []
