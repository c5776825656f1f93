"""Configuration adapter - loading, validation and display.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.settings` - [chain] section validation
    * :mod:`.display` - Configuration and value display in human/JSON formats
"""

from __future__ import annotations

from .display import display_config, display_values, render_value
from .loader import get_config, get_default_config_path
from .settings import ChainSettings, load_chain_settings

__all__ = [
    "ChainSettings",
    "display_config",
    "display_values",
    "get_config",
    "get_default_config_path",
    "load_chain_settings",
    "render_value",
]
