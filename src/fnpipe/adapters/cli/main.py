"""Process-level CLI runner shared by the console script and ``python -m fnpipe``.

Contents:
    * :func:`main` - Run the root group and return an exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from fnpipe import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from fnpipe.composition import AppServices


def _report_fault(exc: BaseException) -> int:
    """Print ``exc`` via lib_cli_exit_tools and return its system exit code.

    A summary is printed unless ``--traceback`` switched the flags on.
    """
    verbose = snapshot_traceback_state().enabled
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    """Run the root group in non-standalone mode so ``obj`` can be passed.

    Click's own exits and usage errors keep their codes; a ``SystemExit``
    raised by a command (``ExitCode.CONFIG_ERROR`` and friends) is returned
    as is; every other fault is reported by :func:`_report_fault`.
    """
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1
    except BaseException as exc:  # noqa: BLE001 - CLI boundary, reported and mapped
        return _report_fault(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the traceback flags back as they were before
            the run.
        services_factory: Builds the AppServices for this run; callers
            outside the adapters layer pass ``build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from fnpipe.composition import build_testing
        >>> main(["compose", "--format", "human"], services_factory=build_testing)
        [compose demo #1] 21 vs 17
        [compose demo #2] [hi] vs [  hi  ]
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = snapshot_traceback_state()
    try:
        return _invoke(list(sys.argv[1:] if argv is None else argv), services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        # Worker threads must not tear down the shared logging runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
