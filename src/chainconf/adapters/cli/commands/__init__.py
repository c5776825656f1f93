"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Config display from :mod:`.config`
    * Chain commands from :mod:`.chain_cmd`
"""

from __future__ import annotations

from .chain_cmd import cli_all, cli_get, cli_merge, cli_remove, cli_set, cli_set_all
from .config import cli_config
from .info import cli_info

__all__ = [
    "cli_all",
    "cli_config",
    "cli_get",
    "cli_info",
    "cli_merge",
    "cli_remove",
    "cli_set",
    "cli_set_all",
]
