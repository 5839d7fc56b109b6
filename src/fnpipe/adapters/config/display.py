"""Configuration display backed by lib_layered_config's Rich renderer.

Pending log records are flushed first so they never interleave with the
rendered configuration.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _render_config
from rich.console import Console

from fnpipe.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render ``config`` (or one ``section`` of it) to stdout.

    Args:
        config: Loaded layered configuration.
        output_format: TOML-like human output or JSON.
        section: Restrict output to one top-level section, e.g. ``showcase``.
        console: Rich console override, mainly for tests.
        profile: Profile name shown in provenance comments.

    Raises:
        ValueError: If ``section`` does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _render_config(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
