"""CLI config stories: display, JSON format, sections, profiles."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from click.testing import CliRunner, Result

from chainconf.adapters import cli as cli_mod
from chainconf.adapters.cli.exit_codes import ExitCode


@pytest.mark.os_agnostic
def test_when_config_is_invoked_it_displays_configuration(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """The bundled defaults include the [chain] section."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=production_factory)

    assert result.exit_code == 0
    assert "chain" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_it_outputs_json(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """config --format json outputs JSON on stdout."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    assert "{" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_mocked_data_it_displays_sections(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Injected sections and values appear in the human output."""
    factory = config_cli_context({"service": {"name": "api", "port": 8080}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "service" in result.stdout
    assert "name" in result.stdout
    assert "api" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_and_section_it_shows_section(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """--section restricts JSON output to one table."""
    factory = config_cli_context({"chain": {"cache_files": ["/tmp/cache.json"]}, "other": {"x": 1}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json", "--section", "chain"], obj=factory)

    assert result.exit_code == 0
    assert "/tmp/cache.json" in result.stdout
    assert "other" not in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_nonexistent_section_it_fails(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """A missing section exits with EINVAL."""
    factory = config_cli_context({"chain": {}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "nonexistent"], obj=factory)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "Error:" in result.stderr


@pytest.mark.os_agnostic
def test_config_works_when_chain_section_is_broken(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """The chain is never built for config, so a bad [chain] does not block it."""
    factory = config_cli_context({"chain": {"bogus": True}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=factory)

    assert result.exit_code == 0
    assert orjson.loads(result.stdout)["chain"] == {"bogus": True}


@pytest.mark.os_agnostic
def test_profile_is_passed_to_get_config(cli_runner: CliRunner) -> None:
    """--profile reaches the configuration loader."""
    from lib_layered_config import Config

    from chainconf.composition import AppServices, build_testing

    seen: list[str | None] = []
    testing = build_testing()

    def _get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
        seen.append(profile)
        return Config({}, {})

    services = AppServices(
        get_config=_get_config,
        display_config=testing.display_config,
        build_chain=testing.build_chain,
        init_logging=testing.init_logging,
    )

    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "staging", "config"], obj=lambda: services)

    assert result.exit_code == 0
    assert seen == ["staging"]


@pytest.mark.os_agnostic
def test_invalid_profile_name_is_rejected(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    """Path-traversal profile names never reach the filesystem."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "../etc", "config"], obj=production_factory)

    assert result.exit_code != 0
