"""``--set SECTION.KEY=VALUE`` parsing and merging into a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Types :func:`coerce_value` can return."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A parsed ``--set`` entry."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("json")
        'json'
        >>> coerce_value("false")
        False
        >>> coerce_value("10000")
        10000
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` at the first ``=`` and the dots before it.

    Raises:
        ValueError: Missing ``=``, no dot in the key, or an empty component.

    Examples:
        >>> parse_override("showcase.output_format=json")
        ConfigOverride(section='showcase', key_path=('output_format',), value='json')
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    node: dict[str, object] = tree.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for part in parents:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` entry deep-merged on top.

    Raises:
        ValueError: If any entry is malformed.

    Examples:
        >>> cfg = Config({"showcase": {"output_format": "human"}}, {})
        >>> apply_overrides(cfg, ("showcase.output_format=json",))["showcase"]["output_format"]
        'json'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
