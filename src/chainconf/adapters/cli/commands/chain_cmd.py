"""Chain commands: read and write values through the source chain.

Contents:
    * :func:`cli_get` - Resolve one key (with back-propagation).
    * :func:`cli_set` - Write one key to every source.
    * :func:`cli_remove` - Remove one key from every source.
    * :func:`cli_all` - Resolve the first non-empty mapping.
    * :func:`cli_set_all` - Replace the content of every source.
    * :func:`cli_merge` - Merge values into every source.
"""

from __future__ import annotations

import logging
from typing import Any

import rich_click as click

from chainconf.adapters.config.display import display_values, render_value
from chainconf.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ..values import coerce_value, parse_object
from ._shared import bound_logging, open_chain

logger = logging.getLogger(__name__)

_MISSING = object()


def _object_argument(ctx: click.Context, param: click.Parameter, value: str) -> dict[str, Any]:
    """Click callback turning a JSON_OBJECT argument into a dict."""
    try:
        return parse_object(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


@click.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option(
    "--default",
    "default_raw",
    type=str,
    default=None,
    help="Value to print when no source has KEY (parsed as JSON, else a plain string)",
)
@click.pass_context
def cli_get(ctx: click.Context, key: str, default_raw: str | None) -> None:
    """Print the value of KEY as JSON, taken from the first source that has it.

    A value found in a lower-priority source is written back into every
    source ahead of it. Without --default a missing key exits with 61.
    """
    cli_ctx = get_cli_context(ctx)
    chain = open_chain(cli_ctx)
    default = _MISSING if default_raw is None else coerce_value(default_raw)
    with bound_logging("cli-get", command="get", key=key):
        value = chain.get(key, default)
        if value is _MISSING:
            logger.info("Key not found in any source", extra={"key": key})
            click.echo(f"Error: key {key!r} not found", err=True)
            raise SystemExit(ExitCode.KEY_NOT_FOUND)
        click.echo(render_value(value))


@click.command("set", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.argument("value")
@click.pass_context
def cli_set(ctx: click.Context, key: str, value: str) -> None:
    """Write KEY=VALUE into every source (VALUE parsed as JSON, else a string)."""
    chain = open_chain(get_cli_context(ctx))
    with bound_logging("cli-set", command="set", key=key):
        logger.info("Setting key", extra={"key": key})
        chain.set(key, coerce_value(value))


@click.command("remove", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.pass_context
def cli_remove(ctx: click.Context, key: str) -> None:
    """Remove KEY from every source."""
    chain = open_chain(get_cli_context(ctx))
    with bound_logging("cli-remove", command="remove", key=key):
        logger.info("Removing key", extra={"key": key})
        chain.remove(key)


@click.command("all", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_all(ctx: click.Context, output_format: str) -> None:
    """Print the first non-empty set of values found in the chain."""
    chain = open_chain(get_cli_context(ctx))
    fmt = OutputFormat(output_format.lower())
    with bound_logging("cli-all", command="all", format=fmt.value):
        values = chain.all()
        logger.info("Resolved values", extra={"count": len(values)})
        display_values(values, output_format=fmt)


@click.command("set-all", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("values", metavar="JSON_OBJECT", callback=_object_argument)
@click.pass_context
def cli_set_all(ctx: click.Context, values: dict[str, Any]) -> None:
    """Replace the content of every source with JSON_OBJECT."""
    chain = open_chain(get_cli_context(ctx))
    with bound_logging("cli-set-all", command="set-all"):
        logger.info("Replacing values", extra={"count": len(values)})
        chain.set_all(values)


@click.command("merge", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("values", metavar="JSON_OBJECT", callback=_object_argument)
@click.pass_context
def cli_merge(ctx: click.Context, values: dict[str, Any]) -> None:
    """Merge JSON_OBJECT into every source."""
    chain = open_chain(get_cli_context(ctx))
    with bound_logging("cli-merge", command="merge"):
        logger.info("Merging values", extra={"count": len(values)})
        chain.merge(values)


__all__ = ["cli_all", "cli_get", "cli_merge", "cli_remove", "cli_set", "cli_set_all"]
