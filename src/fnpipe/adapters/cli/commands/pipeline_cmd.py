"""Pipeline evaluation command.

Contents:
    * :func:`cli_pipeline` - Evaluate strings given on the command line.
"""

from __future__ import annotations

import logging

import rich_click as click

from fnpipe.application.showcase import PIPELINE_SAMPLE, pipeline_demo
from fnpipe.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import emit_lines, format_option, job_scope, resolve_output_format

logger = logging.getLogger(__name__)


def _echo_observed(value: str) -> None:
    click.echo(f"  observed: {value}")


@click.command("pipeline", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("items", nargs=-1)
@click.option("--echo/--no-echo", "echo_observed", default=False, help="Print each normalized entry as it is observed")
@format_option
@click.pass_context
def cli_pipeline(ctx: click.Context, items: tuple[str, ...], echo_observed: bool, output_format: str | None) -> None:
    """Sum the trimmed, lower-cased lengths of the non-blank ITEMS.

    Without ITEMS the built-in sample ("  a  ", "", " bb", None, "CCC ")
    is used.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = resolve_output_format(cli_ctx, output_format)
    entries = items if items else PIPELINE_SAMPLE
    # Echoed lines would corrupt the JSON document.
    observer = _echo_observed if echo_observed and fmt is OutputFormat.HUMAN else None

    with job_scope("cli-pipeline", {"command": "pipeline", "entries": len(entries)}):
        logger.info("Evaluating pipeline", extra={"sample": not items})
        emit_lines([pipeline_demo(entries, observe=observer)], fmt)


__all__ = ["cli_pipeline"]
