"""Root ``fnpipe`` command group.

The group owns the options that affect every command (traceback output,
configuration profile, ``--set`` overrides) and falls through to the full
showcase when no subcommand is named.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from fnpipe import __init__conf__
from fnpipe.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from fnpipe.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read layered configuration for ``profile`` and lay ``--set`` entries on top.

    Raises:
        click.UsageError: A ``--set`` entry is malformed.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, help="Configuration profile to load, e.g. 'staging'")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; repeat for several (e.g. showcase.output_format=json)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Build services, load configuration, start logging, then dispatch.

    ``ctx.obj`` arrives holding the services factory and leaves holding a
    :class:`~fnpipe.adapters.cli.context.CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from fnpipe.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["compose"], obj=build_testing)
        >>> result.exit_code, "21 vs 17" in result.output
        (0, True)
    """
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx, traceback=traceback, config=config, services=services, profile=profile, set_overrides=set_overrides
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        from .commands import cli_run

        ctx.invoke(cli_run)


# Command modules import this package, so they are attached after ``cli`` exists.
def _register_commands() -> None:
    from . import commands

    for command in (
        commands.cli_run,
        commands.cli_pipeline,
        commands.cli_compose,
        commands.cli_bench,
        commands.cli_info,
        commands.cli_config,
        commands.cli_fail,
    ):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
