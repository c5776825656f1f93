"""Chain settings and production chain assembly."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from lib_layered_config import Config

from chainconf.adapters.config.settings import ChainSettings, load_chain_settings
from chainconf.adapters.sources import JsonFileSource, LayeredConfigSource, build_chain
from chainconf.domain.errors import ConfigurationError, InvalidConfiguration


@pytest.mark.os_agnostic
def test_chain_settings_defaults() -> None:
    """No cache files; the layered configuration is included."""
    settings = ChainSettings()

    assert settings.cache_files == []
    assert settings.include_layered is True


@pytest.mark.os_agnostic
def test_chain_settings_expand_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Cache file paths starting with ~ are expanded."""
    monkeypatch.setenv("HOME", str(tmp_path))

    settings = ChainSettings.model_validate({"cache_files": ["~/a.json"]})

    assert settings.cache_files == [tmp_path / "a.json"]


@pytest.mark.os_agnostic
def test_load_chain_settings_reads_chain_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """The [chain] table maps onto ChainSettings."""
    config = config_factory({"chain": {"cache_files": ["/tmp/a.json"], "include_layered": False}})

    settings = load_chain_settings(config)

    assert settings.cache_files == [Path("/tmp/a.json")]
    assert settings.include_layered is False


@pytest.mark.os_agnostic
def test_load_chain_settings_rejects_unknown_keys(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Typos in the section are reported instead of ignored."""
    with pytest.raises(ConfigurationError, match="Invalid \\[chain\\]"):
        load_chain_settings(config_factory({"chain": {"cache_file": "/tmp/a.json"}}))


@pytest.mark.os_agnostic
def test_load_chain_settings_rejects_non_table(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """A scalar [chain] value is a configuration error."""
    with pytest.raises(ConfigurationError, match="must be a table"):
        load_chain_settings(config_factory({"chain": "oops"}))


@pytest.mark.os_agnostic
def test_build_chain_orders_cache_files_before_layered(
    config_factory: Callable[[dict[str, Any]], Config], tmp_path: Path
) -> None:
    """Cache files keep their configured order; the layered view closes the chain."""
    first, second = tmp_path / "first.json", tmp_path / "second.json"
    config = config_factory({"chain": {"cache_files": [str(first), str(second)]}})

    chain = build_chain(config)

    assert [type(source) for source in chain.sources] == [JsonFileSource, JsonFileSource, LayeredConfigSource]
    assert [source.path for source in chain.sources[:2]] == [first, second]  # type: ignore[attr-defined]


@pytest.mark.os_agnostic
def test_build_chain_without_layered_source(config_factory: Callable[[dict[str, Any]], Config], tmp_path: Path) -> None:
    """include_layered = false leaves only the cache files."""
    config = config_factory(
        {"chain": {"cache_files": [str(tmp_path / "a.json"), str(tmp_path / "b.json")], "include_layered": False}}
    )

    chain = build_chain(config)

    assert all(isinstance(source, JsonFileSource) for source in chain.sources)


@pytest.mark.os_agnostic
def test_build_chain_with_single_source_is_invalid(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Only the layered source configured: not a chain."""
    with pytest.raises(InvalidConfiguration):
        build_chain(config_factory({"chain": {"cache_files": []}}))


@pytest.mark.os_agnostic
def test_built_chain_resolves_from_layered_config_into_cache(
    config_factory: Callable[[dict[str, Any]], Config], tmp_path: Path
) -> None:
    """End to end: a layered value is promoted into the cache file."""
    cache = tmp_path / "cache.json"
    config = config_factory({"chain": {"cache_files": [str(cache)]}, "service": {"name": "api"}})

    chain = build_chain(config)

    assert chain.get("service.name") == "api"
    assert JsonFileSource(cache).all() == {"service.name": "api"}
