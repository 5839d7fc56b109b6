"""Shared helpers for the command modules.

Contents:
    * :func:`format_option` - ``--format`` option shared by showcase commands.
    * :func:`resolve_output_format` - Explicit option, else ``[showcase]`` config.
    * :func:`emit_lines` - Print demo lines as labelled text or JSON.
    * :func:`job_scope` - Bind log context for the duration of a command.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any, TypeVar

import lib_log_rich.runtime
import orjson
import rich_click as click

from fnpipe.adapters.config.settings import load_showcase_settings
from fnpipe.application.showcase import DemoLine
from fnpipe.domain.enums import OutputFormat
from fnpipe.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode

F = TypeVar("F", bound=Callable[..., Any])


@contextmanager
def job_scope(job_id: str, extra: Mapping[str, object]) -> Iterator[None]:
    """Bind ``job_id`` and ``extra`` to log records while the block runs.

    Nothing is bound when no lib_log_rich runtime is active, as with the
    in-memory services.
    """
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=job_id, extra=dict(extra)):
        yield


def format_option(func: F) -> F:
    """Attach ``--format human|json`` defaulting to the configured format."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
        default=None,
        help="Output format; defaults to showcase.output_format from configuration",
    )(func)


def resolve_output_format(cli_ctx: CLIContext, requested: str | None) -> OutputFormat:
    """Return the requested format, falling back to configuration.

    Raises:
        SystemExit: ``ExitCode.CONFIG_ERROR`` when the ``[showcase]``
            section is invalid and no format was requested.
    """
    if requested:
        return OutputFormat(requested.lower())
    try:
        return load_showcase_settings(cli_ctx.config).output_format
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def emit_lines(lines: Sequence[DemoLine], output_format: OutputFormat) -> None:
    """Print ``lines`` as ``[label] message`` rows or one indented JSON array."""
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    if output_format is OutputFormat.JSON:
        payload = orjson.dumps([line.as_dict() for line in lines], option=orjson.OPT_INDENT_2)
        click.echo(payload.decode("utf-8"))
        return
    for line in lines:
        click.echo(line.render())


__all__ = [
    "emit_lines",
    "format_option",
    "job_scope",
    "resolve_output_format",
]
