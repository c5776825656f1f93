"""In-memory adapter implementations.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no logging framework.

Contents:
    * :mod:`.source` - Dict-backed ConfigSource (InMemorySource)
    * :mod:`.config` - In-memory configuration and chain adapters
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    build_chain_in_memory,
    display_config_in_memory,
    get_config_in_memory,
)
from .logging import init_logging_in_memory
from .source import InMemorySource

# Static conformance assertions
if TYPE_CHECKING:
    from chainconf.application.ports import (
        BuildChain,
        ConfigSource,
        DisplayConfig,
        GetConfig,
        InitLogging,
    )

    _assert_source: ConfigSource = InMemorySource()
    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_build_chain: BuildChain = build_chain_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "InMemorySource",
    "build_chain_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
