"""Shared pytest fixtures for domain, CLI and module-entry tests.

Fixtures use descriptive names that read as plain English and are picked up
implicitly through pytest's conftest discovery.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from fnpipe.adapters.memory import StepClock

if TYPE_CHECKING:
    from fnpipe.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when parsing output so log records written to
    stderr cannot interfere.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real config, logging, clock)."""
    from fnpipe.composition import build_production

    return build_production


@pytest.fixture
def step_clock() -> StepClock:
    """Provide a clock advancing 1,000 ns per read."""
    return StepClock(start=0, step=1_000)


@pytest.fixture
def testing_factory(step_clock: StepClock) -> Callable[[], AppServices]:
    """Provide an in-memory services factory sharing ``step_clock``.

    Example:
        def test_bench(cli_runner, testing_factory, step_clock) -> None:
            cli_runner.invoke(cli, ["bench"], obj=testing_factory)
            assert step_clock.reads == 3
    """
    from fnpipe.composition import build_testing

    services = build_testing(clock=step_clock)
    return lambda: services


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test."""
    from fnpipe.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
    step_clock: StepClock,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    The factory uses the production display and logging adapters, the given
    config in place of file discovery, and the shared step clock.

    Example:
        def test_json_default(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"showcase": {"output_format": "json"}})
            result = cli_runner.invoke(cli, ["compose"], obj=factory)
            assert result.stdout.startswith("[")
    """
    from fnpipe.composition import build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = replace(build_production(), get_config=_fake_get_config).with_clock(step_clock)
        return lambda: services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
    step_clock: StepClock,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a function building a services factory that records profiles.

    Every ``profile`` passed to ``get_config`` is appended to the capture
    list, so tests can assert on ``--profile`` propagation.
    """
    from fnpipe.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            clock=step_clock,
        )
        return lambda: services

    return _inject
