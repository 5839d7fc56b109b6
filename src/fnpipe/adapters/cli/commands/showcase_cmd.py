"""Full showcase command.

Contents:
    * :func:`cli_run` - Run every demonstration in order.
"""

from __future__ import annotations

import logging

import rich_click as click

from fnpipe.application.showcase import run_showcase

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import emit_lines, format_option, job_scope, resolve_output_format

logger = logging.getLogger(__name__)


@click.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@format_option
@click.pass_context
def cli_run(ctx: click.Context, output_format: str | None) -> None:
    """Run the lambda, pipeline, composition, benchmark and sequence demos.

    Also what ``fnpipe`` does when called without a subcommand.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = resolve_output_format(cli_ctx, output_format)
    with job_scope("cli-run", {"command": "run", "format": fmt.value}):
        logger.info("Running showcase")
        report = run_showcase(cli_ctx.services.clock)
        emit_lines(report.lines, fmt)


__all__ = ["cli_run"]
