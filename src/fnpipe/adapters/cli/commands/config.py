"""``fnpipe config``: show the merged configuration and where it came from."""

from __future__ import annotations

import logging

import rich_click as click
from lib_layered_config import Config

from fnpipe.adapters.config.overrides import apply_overrides
from fnpipe.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode
from ._shared import job_scope

logger = logging.getLogger(__name__)


def _config_for_profile(cli_ctx: CLIContext, profile: str | None) -> Config:
    """Reuse the root config unless another profile is asked for.

    A reloaded profile gets the root ``--set`` overrides again so both
    paths show the same effective values.
    """
    if not profile or profile == cli_ctx.profile:
        return cli_ctx.config
    return apply_overrides(cli_ctx.services.get_config(profile=profile), cli_ctx.set_overrides)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="TOML-like text with provenance comments, or JSON",
)
@click.option("--section", default=None, help="Only this top-level section, e.g. 'showcase' or 'lib_log_rich'")
@click.option("--profile", default=None, help="Show another profile than the one given to the root command")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Display the merged configuration.

    Layers, lowest first: bundled defaults, app, host, user, .env,
    environment, then ``--set``.
    """
    cli_ctx = get_cli_context(ctx)
    shown_profile = profile or cli_ctx.profile
    config = _config_for_profile(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    with job_scope("cli-config", {"command": "config", "format": fmt.value, "profile": shown_profile}):
        logger.info("Displaying configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
