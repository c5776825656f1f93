"""Priority chain of configuration sources.

:class:`ChainConfig` groups several :class:`~chainconf.application.ports.ConfigSource`
objects in priority order (index 0 first) and presents the same interface
over all of them:

* Reads stop at the first source that knows the answer. A value found in a
  lower-priority source is written back into every source ahead of it so the
  next read resolves earlier.
* Writes are delivered to every source.
* A failing source never fails the chain. Each delegated call produces a
  :class:`SourceOutcome`; failed outcomes are logged and skipped.

Contents:
    * :class:`SourceOutcome` - result of one delegated call.
    * :class:`ChainConfig` - the chain itself.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..domain.enums import ChainOperation
from ..domain.errors import InvalidConfiguration, SourceOperationFailed, TypeMismatch
from .ports import ConfigSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceOutcome:
    """Result of delegating one operation to one source.

    Attributes:
        index: Position of the source in the chain.
        value: Returned value; ``None`` for writes and failures.
        error: Wrapped failure, or ``None`` on success.

    Example:
        >>> SourceOutcome(index=0, value="x").failed
        False
    """

    index: int
    value: Any = None
    error: SourceOperationFailed | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def _is_hit(value: Any, default: Any) -> bool:
    """Return True when *value* is a genuine answer rather than the default.

    Values of a different type always count, so ``False`` is not mistaken
    for a default of ``0``.

    Example:
        >>> _is_hit(False, 0), _is_hit(0.0, 0), _is_hit(0, 0)
        (True, True, False)
    """
    if value is default:
        return False
    return type(value) is not type(default) or value != default


class ChainConfig:
    """Ordered group of configuration sources with read fallback.

    Args:
        sources: Sources in priority order, highest first. At least two.

    Raises:
        InvalidConfiguration: Fewer than two sources were given.
        TypeMismatch: *sources* is not an ordered sequence, or a member is a
            class or does not implement the ConfigSource methods.

    Example:
        >>> from chainconf.adapters.memory import InMemorySource
        >>> top, bottom = InMemorySource(), InMemorySource({"x": "hello"})
        >>> chain = ChainConfig([top, bottom])
        >>> chain.get("x")
        'hello'
        >>> top.get("x")
        'hello'
    """

    def __init__(self, sources: Sequence[ConfigSource]) -> None:
        # Priority is positional; unordered collections have none.
        if not isinstance(sources, Sequence) or isinstance(sources, (str, bytes)):
            raise TypeMismatch(f"Expected an ordered sequence of sources, got {type(sources).__name__}")
        members = tuple(sources)
        if len(members) < 2:
            raise InvalidConfiguration(f"A chain needs at least 2 sources, got {len(members)}")
        for member in members:
            if isinstance(member, type):
                raise TypeMismatch(f"Expected a ConfigSource instance, got the class {member.__name__}")
            if not isinstance(member, ConfigSource):
                raise TypeMismatch(f"Expected a ConfigSource, got {type(member).__name__}")
        self._sources: tuple[ConfigSource, ...] = members

    @property
    def sources(self) -> tuple[ConfigSource, ...]:
        """Sources in priority order."""
        return self._sources

    def __len__(self) -> int:
        return len(self._sources)

    def __repr__(self) -> str:
        names = ", ".join(type(source).__name__ for source in self._sources)
        return f"ChainConfig([{names}])"

    def get(self, key: str, default: Any = None) -> Any:
        """Return the first value for *key* that differs from *default*.

        A hit below index 0 is back-propagated with ``set`` into every
        higher-priority source. When no source has the key, *default* is
        returned and nothing is written.
        """
        for index, source in enumerate(self._sources):
            outcome = self._attempt(index, source, ChainOperation.GET, key, default)
            if outcome.failed or not _is_hit(outcome.value, default):
                continue
            if index > 0:
                logger.debug("Promoting %r from source #%d", key, index)
                for upper in reversed(range(index)):
                    self._attempt(upper, self._sources[upper], ChainOperation.SET, key, outcome.value)
            return outcome.value
        return default

    def set(self, key: str, value: Any) -> None:
        """Write *key* into every source."""
        self._broadcast(ChainOperation.SET, key, value)

    def remove(self, key: str) -> None:
        """Remove *key* from every source."""
        self._broadcast(ChainOperation.REMOVE, key)

    def all(self) -> Mapping[str, Any]:
        """Return the first non-empty mapping found in the chain.

        A hit below index 0 is back-propagated with ``set_all``. When no
        source returns a non-empty mapping, the last empty result is returned;
        when every source fails, an empty dict.
        """
        current: Mapping[str, Any] = {}
        for index, source in enumerate(self._sources):
            outcome = self._attempt(index, source, ChainOperation.ALL)
            if outcome.failed:
                continue
            current = outcome.value
            if not current:
                continue
            if index > 0:
                logger.debug("Promoting %d values from source #%d", len(current), index)
                for upper in reversed(range(index)):
                    if not current:
                        break
                    self._attempt(upper, self._sources[upper], ChainOperation.SET_ALL, current)
            return current
        return current

    def set_all(self, values: Mapping[str, Any]) -> None:
        """Replace the content of every source with *values*."""
        self._broadcast(ChainOperation.SET_ALL, values)

    def merge(self, values: Mapping[str, Any]) -> None:
        """Merge *values* into every source."""
        self._broadcast(ChainOperation.MERGE, values)

    def _broadcast(self, operation: ChainOperation, *args: Any) -> None:
        for index, source in enumerate(self._sources):
            self._attempt(index, source, operation, *args)

    def _attempt(self, index: int, source: ConfigSource, operation: ChainOperation, *args: Any) -> SourceOutcome:
        """Delegate *operation* to *source*, capturing any failure as an outcome."""
        method: Callable[..., Any] = getattr(source, operation.value)
        try:
            value = method(*args)
        except Exception as exc:
            error = SourceOperationFailed(operation, index, type(source).__name__, str(exc) or type(exc).__name__)
            error.__cause__ = exc
            logger.debug("Ignoring failed source call: %s", error)
            return SourceOutcome(index=index, error=error)
        return SourceOutcome(index=index, value=value)


__all__ = [
    "ChainConfig",
    "SourceOutcome",
]
