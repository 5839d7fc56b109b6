"""Configuration adapter - loading, overrides, typed settings, and display.

Contents:
    * :mod:`.loader` - lib_layered_config loading with caching
    * :mod:`.overrides` - CLI ``--set`` override parsing and merging
    * :mod:`.settings` - pydantic view of the ``[showcase]`` section
    * :mod:`.display` - Human/JSON configuration display
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import ShowcaseSettings, load_showcase_settings

__all__ = [
    "ShowcaseSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_showcase_settings",
]
