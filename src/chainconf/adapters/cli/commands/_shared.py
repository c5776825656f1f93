"""Helpers shared by the chain commands."""

from __future__ import annotations

import contextlib
from contextlib import AbstractContextManager
from typing import Any

import lib_log_rich.runtime
import rich_click as click

from chainconf.application.chain import ChainConfig
from chainconf.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode


def bound_logging(job_id: str, **extra: Any) -> AbstractContextManager[Any]:
    """Bind *job_id* and *extra* to log records when the runtime is up.

    In-memory wiring never initialises lib_log_rich, so the binding is
    skipped there.
    """
    if lib_log_rich.runtime.is_initialised():
        return lib_log_rich.runtime.bind(job_id=job_id, extra=extra)
    return contextlib.nullcontext()


def open_chain(cli_ctx: CLIContext) -> ChainConfig:
    """Build the chain for this invocation, exiting with EX_CONFIG on failure."""
    try:
        return cli_ctx.services.build_chain(cli_ctx.config)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


__all__ = ["bound_logging", "open_chain"]
