"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.sources` - Concrete configuration sources and chain assembly
    * :mod:`.config` - Layered configuration loading, validation and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory implementations for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
