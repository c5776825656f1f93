"""In-memory configuration and chain adapters for testing.

Satisfy the same Protocols as the production adapters without touching
the filesystem.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...application.chain import ChainConfig
from ...domain.enums import OutputFormat
from ..sources.layered import LayeredConfigSource
from .source import InMemorySource


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


def build_chain_in_memory(config: Config) -> ChainConfig:
    """Chain an empty in-memory cache in front of *config*.

    Example:
        >>> chain = build_chain_in_memory(Config({"app": {"name": "demo"}}, {}))
        >>> chain.get("app.name")
        'demo'
        >>> chain.sources[0].get("app.name")
        'demo'
    """
    return ChainConfig([InMemorySource(), LayeredConfigSource(config)])


__all__ = [
    "build_chain_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
]
