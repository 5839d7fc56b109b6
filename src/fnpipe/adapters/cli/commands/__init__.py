"""CLI command implementations.

Collects every subcommand for registration with the root group.

Contents:
    * Showcase command from :mod:`.showcase_cmd`
    * Pipeline command from :mod:`.pipeline_cmd`
    * Composition command from :mod:`.compose_cmd`
    * Benchmark command from :mod:`.bench_cmd`
    * Info and failure commands from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .bench_cmd import cli_bench
from .compose_cmd import cli_compose
from .config import cli_config
from .info import cli_fail, cli_info
from .pipeline_cmd import cli_pipeline
from .showcase_cmd import cli_run

__all__ = [
    "cli_bench",
    "cli_compose",
    "cli_config",
    "cli_fail",
    "cli_info",
    "cli_pipeline",
    "cli_run",
]
