"""Loop-versus-stream benchmark command.

Contents:
    * :func:`cli_bench` - Time both variants and print their totals.
"""

from __future__ import annotations

import logging

import rich_click as click

from fnpipe.application.showcase import benchmark_demo

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import emit_lines, format_option, job_scope, resolve_output_format

logger = logging.getLogger(__name__)


@click.command("bench", context_settings=CLICK_CONTEXT_SETTINGS)
@format_option
@click.pass_context
def cli_bench(ctx: click.Context, output_format: str | None) -> None:
    """Warm up, then time one loop run and one stream run over 10,000 entries.

    Fails if the two variants disagree on the total.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = resolve_output_format(cli_ctx, output_format)
    with job_scope("cli-bench", {"command": "bench"}):
        logger.info("Running loop-versus-stream benchmark")
        emit_lines(benchmark_demo(cli_ctx.services.clock), fmt)


__all__ = ["cli_bench"]
