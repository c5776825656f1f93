"""Application layer - the source chain and port definitions.

Contents:
    * :mod:`.ports` - ConfigSource protocol and callable adapter protocols
    * :mod:`.chain` - ChainConfig, the prioritised group of sources
"""

from __future__ import annotations

from .chain import ChainConfig, SourceOutcome
from .ports import (
    BuildChain,
    ConfigSource,
    DisplayConfig,
    GetConfig,
    InitLogging,
)

__all__ = [
    "BuildChain",
    "ChainConfig",
    "ConfigSource",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "SourceOutcome",
]
