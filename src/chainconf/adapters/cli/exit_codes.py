"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` — IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following errno and sysexits.h conventions.

    * 0–1: generic success / failure
    * 2: usage error (Click's own convention)
    * 22: EINVAL
    * 61: ENODATA, the requested key resolved nowhere in the chain
    * 78: EX_CONFIG (sysexits.h), the chain could not be built

    Example:
        >>> int(ExitCode.KEY_NOT_FOUND)
        61
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    KEY_NOT_FOUND = 61
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
