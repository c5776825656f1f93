"""Assemble the production chain from configuration."""

from __future__ import annotations

import logging

from lib_layered_config import Config

from ...application.chain import ChainConfig
from ...application.ports import ConfigSource
from ..config.settings import load_chain_settings
from .json_file import JsonFileSource
from .layered import LayeredConfigSource

logger = logging.getLogger(__name__)


def build_chain(config: Config) -> ChainConfig:
    """Build the chain described by the [chain] section of *config*.

    Cache files come first, in the configured order; the layered
    configuration closes the chain when ``include_layered`` is set.

    Raises:
        ConfigurationError: If the [chain] section is invalid.
        InvalidConfiguration: If fewer than two sources result.
    """
    settings = load_chain_settings(config)
    sources: list[ConfigSource] = [JsonFileSource(path) for path in settings.cache_files]
    if settings.include_layered:
        sources.append(LayeredConfigSource(config))
    logger.debug("Building chain", extra={"sources": [repr(source) for source in sources]})
    return ChainConfig(sources)


__all__ = ["build_chain"]
