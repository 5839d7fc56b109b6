"""Read fnpipe's layered configuration through lib_layered_config.

Layers, lowest precedence first: the bundled ``defaultconfig.toml``, then
app, host and user files, ``.env``, and environment variables. A loaded
:class:`Config` is cached per ``(profile, start_dir)`` for the life of the
process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from fnpipe import __init__conf__

_DEFAULT_FILE_NAME = "defaultconfig.toml"


class ConfigLoaderProtocol(Protocol):
    """``get_config`` plus the ``cache_clear`` hook tests rely on."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str) -> None:
    """Raise ValueError for names lib_layered_config would refuse as a directory.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Locate the defaults file shipped inside the package.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).with_name(_DEFAULT_FILE_NAME)


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, reading files only on the first call.

    Args:
        profile: Inserts ``profile/<name>/`` into every search path, e.g.
            ``~/.config/fnpipe/profile/staging/config.toml``.
        start_dir: Where ``.env`` discovery starts; the working directory
            when None.

    Raises:
        ValueError: For an unsafe profile name.

    Example:
        >>> get_config().get("showcase.output_format", default="human") in {"human", "json"}
        True
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


_get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
