"""In-memory configuration adapters for tests.

Satisfy the same Protocols as the production adapters without touching the
filesystem or lib_layered_config's discovery.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config holding only the showcase defaults."""
    return Config({"showcase": {"output_format": OutputFormat.HUMAN.value}}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
