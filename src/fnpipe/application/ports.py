"""Callable Protocols the showcase and CLI depend on.

Adapters are plain functions (or small callable objects such as the step
clock); they satisfy these Protocols structurally, so nothing here imports
an adapter. ``Config`` is only needed for type checking.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Return the merged configuration for an optional profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Print a configuration, or one section of it, as text or JSON."""

    def __call__(
        self,
        config: Config,
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
        profile: str | None = ...,
    ) -> None: ...


class InitLogging(Protocol):
    """Start the logging runtime from the ``[lib_log_rich]`` section."""

    def __call__(self, config: Config) -> None: ...


class MonotonicClock(Protocol):
    """Nanosecond timestamps that never go backwards; only differences matter."""

    def __call__(self) -> int: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "MonotonicClock",
]
