"""Function composition command.

Contents:
    * :func:`cli_compose` - Compare ``and_then`` with ``compose``.
"""

from __future__ import annotations

import rich_click as click

from fnpipe.application.showcase import composition_demo, reference_demo, sequence_demo

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import emit_lines, format_option, job_scope, resolve_output_format


@click.command("compose", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--all", "show_all", is_flag=True, default=False, help="Also show the reference and sequence demos")
@format_option
@click.pass_context
def cli_compose(ctx: click.Context, show_all: bool, output_format: str | None) -> None:
    """Show that and_then and compose apply two functions in opposite orders."""
    fmt = resolve_output_format(get_cli_context(ctx), output_format)
    with job_scope("cli-compose", {"command": "compose"}):
        lines = composition_demo()
        if show_all:
            lines = [*reference_demo(), *lines, sequence_demo()]
        emit_lines(lines, fmt)


__all__ = ["cli_compose"]
