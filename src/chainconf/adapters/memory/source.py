"""Dict-backed configuration source.

:class:`InMemorySource` is the simplest :class:`ConfigSource`: a flat
key/value store. It doubles as a test spy, recording each call and raising
on demand for the operations listed in ``fail_on``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ...domain.enums import ChainOperation


def _empty_call_list() -> list[tuple[ChainOperation, tuple[Any, ...]]]:
    """Create an empty typed list for call records."""
    return []


@dataclass
class InMemorySource:
    """Flat key/value source held in a dict.

    Attributes:
        values: Current content.
        fail_on: Operations that raise ``RuntimeError`` instead of running.
        calls: Every call received, as ``(operation, args)``, including
            the failing ones.

    Example:
        >>> source = InMemorySource({"x": 1})
        >>> source.get("x"), source.get("y", "fallback")
        (1, 'fallback')
        >>> source.merge({"y": 2})
        >>> source.all()
        {'x': 1, 'y': 2}
        >>> broken = InMemorySource(fail_on=frozenset({ChainOperation.SET}))
        >>> broken.set("x", 1)
        Traceback (most recent call last):
        ...
        RuntimeError: simulated set failure
    """

    values: dict[str, Any] = field(default_factory=dict)
    fail_on: frozenset[ChainOperation] = frozenset()
    calls: list[tuple[ChainOperation, tuple[Any, ...]]] = field(default_factory=_empty_call_list)

    def _record(self, operation: ChainOperation, *args: Any) -> None:
        self.calls.append((operation, args))
        if operation in self.fail_on:
            raise RuntimeError(f"simulated {operation.value} failure")

    def calls_for(self, operation: ChainOperation) -> list[tuple[Any, ...]]:
        """Return the argument tuples of every recorded *operation* call."""
        return [args for recorded, args in self.calls if recorded is operation]

    def get(self, key: str, default: Any = None) -> Any:
        self._record(ChainOperation.GET, key, default)
        return self.values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._record(ChainOperation.SET, key, value)
        self.values[key] = value

    def remove(self, key: str) -> None:
        self._record(ChainOperation.REMOVE, key)
        self.values.pop(key, None)

    def all(self) -> dict[str, Any]:
        self._record(ChainOperation.ALL)
        return dict(self.values)

    def set_all(self, values: Mapping[str, Any]) -> None:
        self._record(ChainOperation.SET_ALL, values)
        self.values = dict(values)

    def merge(self, values: Mapping[str, Any]) -> None:
        self._record(ChainOperation.MERGE, values)
        self.values.update(values)


__all__ = ["InMemorySource"]
