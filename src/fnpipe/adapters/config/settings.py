"""Typed view of the ``[showcase]`` configuration section.

Parsed with pydantic at the boundary; validation failures surface as
:class:`~fnpipe.domain.errors.ConfigurationError`.
"""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from fnpipe.domain.enums import OutputFormat
from fnpipe.domain.errors import ConfigurationError


class ShowcaseSettings(BaseModel):
    """Validated ``[showcase]`` section.

    Example:
        >>> ShowcaseSettings(output_format="JSON").output_format
        <OutputFormat.JSON: 'json'>
        >>> ShowcaseSettings().output_format
        <OutputFormat.HUMAN: 'human'>
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_format: OutputFormat = OutputFormat.HUMAN

    @field_validator("output_format", mode="before")
    @classmethod
    def _lower_case(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value


def load_showcase_settings(config: Config) -> ShowcaseSettings:
    """Read the ``[showcase]`` section of ``config``.

    Raises:
        ConfigurationError: When the section holds unknown keys or values.

    Example:
        >>> load_showcase_settings(Config({"showcase": {"output_format": "json"}}, {})).output_format.value
        'json'
        >>> load_showcase_settings(Config({"showcase": {"output_format": "xml"}}, {}))  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        fnpipe.domain.errors.ConfigurationError: invalid [showcase] configuration: output_format: ...
    """
    raw: object = config.get("showcase", default={})
    try:
        return ShowcaseSettings.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"invalid [showcase] configuration: {problems}") from exc


__all__ = [
    "ShowcaseSettings",
    "load_showcase_settings",
]
