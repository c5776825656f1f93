"""Domain layer - pure types with no I/O or framework dependencies.

Contents:
    * :mod:`.enums` - Domain enumerations (ChainOperation, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import ChainOperation, OutputFormat
from .errors import (
    ConfigurationError,
    InvalidConfiguration,
    ReadOnlySourceError,
    SourceOperationFailed,
    TypeMismatch,
)

__all__ = [
    # Enums
    "ChainOperation",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidConfiguration",
    "ReadOnlySourceError",
    "SourceOperationFailed",
    "TypeMismatch",
]
