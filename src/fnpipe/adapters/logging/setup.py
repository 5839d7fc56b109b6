"""lib_log_rich runtime initialisation shared by every entry point.

The CLI root command calls :func:`init_logging` once per process with the
already-loaded configuration; later calls are no-ops. Standard-library
loggers (``logging.getLogger(__name__)`` in the domain and application
layers) are bridged into the runtime.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from fnpipe import __init__conf__


class LoggingConfigModel(BaseModel):
    """``[lib_log_rich]`` section; unknown keys pass through to RuntimeConfig.

    Example:
        >>> LoggingConfigModel(service="fnpipe-bench").service
        'fnpipe-bench'
        >>> LoggingConfigModel().environment
        'prod'
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the ``[lib_log_rich]`` section into a RuntimeConfig.

    The service name falls back to the package name when unset.
    """
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialise the lib_log_rich runtime once and bridge stdlib logging.

    Enables ``.env`` loading so ``LOG_*`` variables apply, then installs
    the runtime. Does nothing when a runtime is already active.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "build_runtime_config",
    "init_logging",
]
