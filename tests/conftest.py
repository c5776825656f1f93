"""Shared pytest fixtures for chain, CLI and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from chainconf.adapters.memory import InMemorySource
    from chainconf.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use result.stdout for clean output (e.g., JSON parsing) so log
    messages on stderr do not contaminate it.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from chainconf.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test."""
    from chainconf.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class ChainCliContext:
    """Services factory plus the chain members it hands out.

    Attributes:
        factory: Callable returning wired AppServices for CLI invocation.
        sources: The exact source objects every built chain uses.
    """

    factory: Callable[[], Any]
    sources: list[InMemorySource]


@pytest.fixture
def chain_cli_context() -> Callable[..., ChainCliContext]:
    """Create a CLI context whose chain is made of inspectable in-memory sources.

    Example:
        def test_get(cli_runner: CliRunner, chain_cli_context: Callable[..., ChainCliContext]) -> None:
            ctx = chain_cli_context({}, {"x": 1})
            result = cli_runner.invoke(cli, ["get", "x"], obj=ctx.factory)
            assert ctx.sources[0].values == {"x": 1}
    """
    from chainconf.adapters.memory import InMemorySource as InMemorySourceImpl
    from chainconf.composition import build_testing

    def _create(*contents: dict[str, Any], fail_on: dict[int, frozenset[Any]] | None = None) -> ChainCliContext:
        failures = fail_on or {}
        sources = [
            InMemorySourceImpl(dict(values), fail_on=failures.get(index, frozenset()))
            for index, values in enumerate(contents)
        ]
        services = build_testing(sources=list(sources))
        return ChainCliContext(factory=lambda: services, sources=sources)

    return _create


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a production-wired services factory with an injected Config."""
    from chainconf.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            build_chain=prod.build_chain,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create
