"""Metadata and failure-path commands.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_fail` - Run the pipeline with an observer that raises.
"""

from __future__ import annotations

import logging

import rich_click as click

from fnpipe import __init__conf__
from fnpipe.application.showcase import pipeline_demo

from ..constants import CLICK_CONTEXT_SETTINGS
from ._shared import job_scope

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with job_scope("cli-info", {"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


def _rejecting_observer(value: str) -> None:
    raise RuntimeError(f"observer rejected {value!r}")


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Evaluate the sample pipeline with an observer that raises.

    The fault is not handled anywhere, so the process exits non-zero.
    """
    with job_scope("cli-fail", {"command": "fail"}):
        logger.warning("Running pipeline with a failing observer")
        pipeline_demo(observe=_rejecting_observer)


__all__ = ["cli_fail", "cli_info"]
