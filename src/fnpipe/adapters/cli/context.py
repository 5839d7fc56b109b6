"""Per-invocation CLI state and traceback flag bookkeeping.

The root command loads configuration once and stores a :class:`CLIContext`
in ``ctx.obj``; every subcommand reads it back with :func:`get_cli_context`.
Traceback flags live in ``lib_cli_exit_tools.config`` and are process
global, so :func:`snapshot_traceback_state` / :func:`restore_traceback_state`
bracket each run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from fnpipe.composition import AppServices


class TracebackState(NamedTuple):
    """Captured ``lib_cli_exit_tools`` flags."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """Configuration and services shared by the subcommands of one run.

    Attributes:
        traceback: ``--traceback`` as given on the root command.
        config: Layered configuration with ``--set`` overrides applied.
        services: Port implementations chosen by the composition root.
        profile: Root ``--profile``; None for the default profile.
        set_overrides: Raw ``--set`` entries, reapplied when a subcommand
            reloads configuration under another profile.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Swap the services factory in ``ctx.obj`` for a populated :class:`CLIContext`."""
    ctx.obj = CLIContext(traceback, config, services, profile, set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state stored by the root command.

    Raises:
        RuntimeError: If the root command has not run for ``ctx``.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).profile is None
        True
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for the exit helpers.

    Example:
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        TracebackState(enabled=True, force_color=True)
        >>> apply_traceback_preferences(False)
    """
    restore_traceback_state(TracebackState(bool(enabled), bool(enabled)))


def snapshot_traceback_state() -> TracebackState:
    """Read the current flags; missing attributes count as disabled."""
    settings = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(settings, "traceback", False)),
        force_color=bool(getattr(settings, "traceback_force_color", False)),
    )


def restore_traceback_state(state: tuple[bool, bool]) -> None:
    """Write flags previously returned by :func:`snapshot_traceback_state`."""
    enabled, force_color = state
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
