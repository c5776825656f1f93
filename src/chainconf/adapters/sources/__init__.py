"""Concrete configuration sources and the production chain builder.

Contents:
    * :mod:`.json_file` - Writable JSON file source
    * :mod:`.layered` - Read-only view over lib_layered_config
    * :mod:`.builder` - Chain assembly from the [chain] section
"""

from __future__ import annotations

from .builder import build_chain
from .json_file import JsonFileSource
from .layered import LayeredConfigSource, flatten

__all__ = [
    "JsonFileSource",
    "LayeredConfigSource",
    "build_chain",
    "flatten",
]
