"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from .enums import ChainOperation


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent configuration.

    Base class for every error raised by this package. Typically caught at
    CLI boundaries to provide user-friendly error messages.

    Example:
        >>> err = ConfigurationError("chain section must be a table")
        >>> str(err)
        'chain section must be a table'
    """


class InvalidConfiguration(ConfigurationError):
    """A chain was requested with fewer than two sources.

    Example:
        >>> err = InvalidConfiguration("A chain needs at least 2 sources, got 1")
        >>> isinstance(err, ConfigurationError)
        True
    """


class TypeMismatch(ConfigurationError, TypeError):
    """A supplied chain member does not implement the ConfigSource capabilities.

    Inherits from TypeError so generic ``except TypeError`` handlers see it.

    Example:
        >>> isinstance(TypeMismatch("Expected a ConfigSource, got int"), TypeError)
        True
    """


class ReadOnlySourceError(ConfigurationError):
    """A write operation was attempted on a read-only source."""


class SourceOperationFailed(ConfigurationError):
    """A single source failed while serving a chain operation.

    The original exception is attached as ``__cause__`` by the chain.

    Attributes:
        operation: Operation that was delegated to the source.
        index: Position of the source in the chain (0 = highest priority).
        source_name: Class name of the failing source.

    Example:
        >>> err = SourceOperationFailed(ChainOperation.GET, 1, "JsonFileSource", "permission denied")
        >>> str(err)
        'get failed on source #1 (JsonFileSource): permission denied'
        >>> err.index
        1
    """

    def __init__(self, operation: ChainOperation, index: int, source_name: str, reason: str) -> None:
        super().__init__(f"{operation.value} failed on source #{index} ({source_name}): {reason}")
        self.operation = operation
        self.index = index
        self.source_name = source_name


__all__ = [
    "ConfigurationError",
    "InvalidConfiguration",
    "ReadOnlySourceError",
    "SourceOperationFailed",
    "TypeMismatch",
]
