"""Validation of the ``[chain]`` configuration section."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ...domain.errors import ConfigurationError


class ChainSettings(BaseModel):
    """Pydantic model for the [chain] config section.

    Attributes:
        cache_files: JSON cache files, highest priority first.
        include_layered: Append the layered configuration as the
            lowest-priority, read-only source.

    Example:
        >>> settings = ChainSettings(cache_files=["~/cache.json"])
        >>> settings.cache_files[0].name
        'cache.json'
        >>> settings.include_layered
        True
    """

    cache_files: list[Path] = []
    include_layered: bool = True

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("cache_files")
    @classmethod
    def _expand_home(cls, value: list[Path]) -> list[Path]:
        return [path.expanduser() for path in value]


def load_chain_settings(config: Config) -> ChainSettings:
    """Parse the [chain] section of *config*.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> load_chain_settings(Config({}, {})).cache_files
        []
    """
    raw: object = config.get("chain", default={})
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[chain] must be a table, got {type(raw).__name__}")
    try:
        return ChainSettings.model_validate(dict(cast("Mapping[str, object]", raw)))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [chain] configuration: {exc}") from exc


__all__ = ["ChainSettings", "load_chain_settings"]
