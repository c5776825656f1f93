"""Domain error types: hierarchy and message formatting."""

from __future__ import annotations

import pytest

from chainconf.domain.enums import ChainOperation
from chainconf.domain.errors import (
    ConfigurationError,
    InvalidConfiguration,
    ReadOnlySourceError,
    SourceOperationFailed,
    TypeMismatch,
)


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    """Instantiation stores the message for display."""
    exc = ConfigurationError("[chain] must be a table")
    assert str(exc) == "[chain] must be a table"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("error_type", [InvalidConfiguration, TypeMismatch, ReadOnlySourceError, SourceOperationFailed])
def test_every_error_is_a_configuration_error(error_type: type[Exception]) -> None:
    """A single except clause catches every package error."""
    assert issubclass(error_type, ConfigurationError)


@pytest.mark.os_agnostic
def test_type_mismatch_is_type_error() -> None:
    """TypeMismatch is also caught by generic TypeError handlers."""
    with pytest.raises(TypeError, match="got int"):
        raise TypeMismatch("Expected a ConfigSource, got int")


@pytest.mark.os_agnostic
def test_source_operation_failed_names_operation_and_position() -> None:
    """The message locates the failure in the chain."""
    exc = SourceOperationFailed(ChainOperation.SET_ALL, 2, "JsonFileSource", "disk full")

    assert str(exc) == "set_all failed on source #2 (JsonFileSource): disk full"
    assert exc.operation is ChainOperation.SET_ALL
    assert exc.index == 2
    assert exc.source_name == "JsonFileSource"
