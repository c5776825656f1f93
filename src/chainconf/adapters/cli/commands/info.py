"""Package information command."""

from __future__ import annotations

import logging

import rich_click as click

from chainconf import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS
from ._shared import bound_logging

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with bound_logging("cli-info", command="info"):
        logger.info("Displaying package information")
        __init__conf__.print_info()


__all__ = ["cli_info"]
