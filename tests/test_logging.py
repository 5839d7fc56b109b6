"""Tests for the logging configuration model and RuntimeConfig translation.

``init_logging`` itself is exercised through the CLI integration tests.
"""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from fnpipe import __init__conf__
from fnpipe.adapters.logging.setup import LoggingConfigModel, build_runtime_config


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Unknown keys pass through for lib_log_rich's RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "bench", "environment": "dev", "console_level": "DEBUG"})

    assert parsed.service == "bench"
    assert parsed.environment == "dev"
    assert parsed.model_dump(exclude={"service", "environment"}, exclude_none=True) == {"console_level": "DEBUG"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_build_runtime_config_falls_back_to_package_name() -> None:
    runtime_config = build_runtime_config(Config({}, {}))

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_build_runtime_config_uses_configured_values() -> None:
    config = Config({"lib_log_rich": {"service": "fnpipe-ci", "environment": "test"}}, {})

    runtime_config = build_runtime_config(config)

    assert runtime_config.service == "fnpipe-ci"
    assert runtime_config.environment == "test"
