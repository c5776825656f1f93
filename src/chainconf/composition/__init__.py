"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Chain services
from ..adapters.sources.builder import build_chain

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..application.ports import (
        BuildChain,
        ConfigSource,
        DisplayConfig,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_build_chain: BuildChain = build_chain
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    build_chain: BuildChain
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        build_chain=build_chain,
        init_logging=init_logging,
    )


def build_testing(*, sources: list[ConfigSource] | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        sources: Optional fixed chain members. When given, every
            ``build_chain`` call returns a chain over exactly these objects so
            tests can inspect them afterwards. When None, an empty in-memory
            cache is chained in front of the layered configuration.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        build_chain_in_memory,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )
    from ..application.chain import ChainConfig

    chain_builder: BuildChain = build_chain_in_memory
    if sources is not None:
        fixed = list(sources)

        def _fixed_chain(config: object) -> ChainConfig:
            return ChainConfig(fixed)

        chain_builder = _fixed_chain

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        build_chain=chain_builder,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Chain
    "build_chain",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
