"""Type-safe domain enums for chain operations and output formats."""

from __future__ import annotations

from enum import Enum


class ChainOperation(str, Enum):
    """Operations a configuration source exposes.

    The value of each member is the name of the source method that
    implements it, so ``getattr(source, op.value)`` resolves the callable.

    Attributes:
        GET: Read a single key with a caller-supplied default.
        SET: Write a single key.
        REMOVE: Delete a single key.
        ALL: Read the whole mapping.
        SET_ALL: Replace the whole mapping.
        MERGE: Shallow-update the mapping.

    Example:
        >>> ChainOperation.SET_ALL.value
        'set_all'
        >>> ChainOperation.GET == "get"
        True
    """

    GET = "get"
    SET = "set"
    REMOVE = "remove"
    ALL = "all"
    SET_ALL = "set_all"
    MERGE = "merge"


class OutputFormat(str, Enum):
    """Output format options for configuration and value display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable ``key = value`` output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "ChainOperation",
    "OutputFormat",
]
