"""Root CLI command group and global option handling.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from chainconf import __init__conf__

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from chainconf.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Root command loading configuration and logging once for all subcommands.

    The chain itself is built lazily by the commands that need it, so
    ``info`` and ``config`` keep working when the [chain] section is broken.
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    services.init_logging(config)
    store_cli_context(ctx, traceback=traceback, config=config, services=services, profile=profile)
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred: command modules import from this package's ancestors.
def _register_commands() -> None:
    from .commands import (
        cli_all,
        cli_config,
        cli_get,
        cli_info,
        cli_merge,
        cli_remove,
        cli_set,
        cli_set_all,
    )

    for cmd in (cli_info, cli_config, cli_get, cli_set, cli_remove, cli_all, cli_set_all, cli_merge):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
