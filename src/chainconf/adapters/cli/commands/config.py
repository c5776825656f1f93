"""Configuration display command.

Contents:
    * :func:`cli_config` - Display merged layered configuration.
"""

from __future__ import annotations

import logging

import rich_click as click

from chainconf.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import bound_logging

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only a specific configuration section (e.g., 'chain')",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None) -> None:
    """Display the layered configuration that closes the chain.

    Precedence: defaults -> app -> host -> user -> dotenv -> env
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with bound_logging("cli-config", command="config", format=fmt.value, profile=cli_ctx.profile):
        logger.info("Displaying configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(cli_ctx.config, output_format=fmt, section=section, profile=cli_ctx.profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
