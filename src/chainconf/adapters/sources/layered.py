"""Read-only source over the layered application configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn, cast

from lib_layered_config import Config

from ...domain.errors import ReadOnlySourceError


def flatten(values: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Collapse nested tables into dotted keys.

    Empty tables are kept as leaves so no section silently disappears.

    Example:
        >>> flatten({"a": {"b": 1, "c": {"d": 2}}, "e": {}, "f": 3})
        {'a.b': 1, 'a.c.d': 2, 'e': {}, 'f': 3}
    """
    flat: dict[str, Any] = {}
    for key, value in values.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, Mapping) and value:
            flat.update(flatten(cast("Mapping[str, Any]", value), f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


class LayeredConfigSource:
    """Expose a ``lib_layered_config.Config`` as a read-only chain member.

    Keys are dotted paths (``section.key``). ``all()`` returns the same
    dotted keys so everything it lists can be read back with ``get``.
    Writes raise :class:`ReadOnlySourceError`.

    Example:
        >>> source = LayeredConfigSource(Config({"chain": {"include_layered": True}}, {}))
        >>> source.get("chain.include_layered")
        True
        >>> source.get("chain.missing", "n/a")
        'n/a'
        >>> source.all()
        {'chain.include_layered': True}
    """

    def __init__(self, config: Config) -> None:
        self.config = config

    def _refuse(self, operation: str) -> NoReturn:
        raise ReadOnlySourceError(f"Layered configuration is read-only; cannot {operation}")

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default=default)

    def set(self, key: str, value: Any) -> None:
        self._refuse(f"set {key!r}")

    def remove(self, key: str) -> None:
        self._refuse(f"remove {key!r}")

    def all(self) -> dict[str, Any]:
        return flatten(self.config.as_dict())

    def set_all(self, values: Mapping[str, Any]) -> None:
        self._refuse("replace values")

    def merge(self, values: Mapping[str, Any]) -> None:
        self._refuse("merge values")


__all__ = ["LayeredConfigSource", "flatten"]
