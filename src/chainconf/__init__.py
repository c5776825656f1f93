"""Public package surface exposing the source chain and its building blocks.

Routes imports through the architectural layers:
- Application exports: ChainConfig and the ConfigSource protocol
- Adapter exports: concrete sources
- Composition exports: wired configuration loader
- Domain exports: error types
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Concrete sources
from .adapters.memory.source import InMemorySource
from .adapters.sources import JsonFileSource, LayeredConfigSource

# Application exports
from .application.chain import ChainConfig, SourceOutcome
from .application.ports import ConfigSource

# Composition exports (wired adapters)
from .composition import build_chain, get_config

# Domain exports
from .domain.enums import ChainOperation
from .domain.errors import (
    ConfigurationError,
    InvalidConfiguration,
    ReadOnlySourceError,
    SourceOperationFailed,
    TypeMismatch,
)

__all__ = [
    "ChainConfig",
    "ChainOperation",
    "ConfigSource",
    "ConfigurationError",
    "InMemorySource",
    "InvalidConfiguration",
    "JsonFileSource",
    "LayeredConfigSource",
    "ReadOnlySourceError",
    "SourceOperationFailed",
    "SourceOutcome",
    "TypeMismatch",
    "build_chain",
    "get_config",
    "print_info",
]
