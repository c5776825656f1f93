"""Application ports — Protocol definitions for sources and adapter functions.

:class:`ConfigSource` is the capability set every chain member implements.
It is ``runtime_checkable`` so :class:`~chainconf.application.chain.ChainConfig`
can validate its members at construction.

The remaining Protocol classes define a ``__call__`` method whose signature
exactly matches the corresponding adapter function. Module-level functions
satisfy them via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so the layers stay independent at
    runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from .chain import ChainConfig


@runtime_checkable
class ConfigSource(Protocol):
    """A key/value configuration store that may participate in a chain.

    Absence of a key is signalled by returning the caller's ``default``;
    raising means the source itself failed.
    """

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def remove(self, key: str) -> None: ...

    def all(self) -> Mapping[str, Any]: ...

    def set_all(self, values: Mapping[str, Any]) -> None: ...

    def merge(self, values: Mapping[str, Any]) -> None: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class BuildChain(Protocol):
    """Assemble the source chain described by the ``[chain]`` section."""

    def __call__(self, config: Config) -> ChainConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "BuildChain",
    "ConfigSource",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
]
