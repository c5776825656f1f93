"""Layered configuration loading with caching and profile support."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from chainconf import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Validate a profile name with lib_layered_config's rules.

    Raises:
        ValueError: If the name is empty, too long, contains path separators
            or other invalid characters.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path of the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One Config per (profile, start_dir) for the lifetime of the CLI process.
@lru_cache(maxsize=4)
def _read(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load layered configuration with the bundled defaults.

    Precedence, lowest first: defaults → app → host → user → dotenv → env.
    The ``[chain]`` section read here decides which cache files sit in
    front of the layered view when the chain is built.

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into
            every configuration path.
        start_dir: Directory that seeds ``.env`` discovery; defaults to the
            current working directory.

    Returns:
        Immutable configuration object with provenance tracking.

    Raises:
        ValueError: If *profile* is not a valid profile name.
    """
    if profile is not None:
        validate_profile(profile)
    return _read(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Forget cached configurations so the next call re-reads the files."""
    _read.cache_clear()


# lru_cache's cache_clear is invisible once the wrapper is cast to the Protocol.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
