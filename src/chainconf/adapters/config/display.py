"""Display layered configuration and resolved chain values.

:func:`display_config` delegates to lib_layered_config's Rich display.
:func:`render_value` and :func:`display_values` format what the chain
returns, as JSON or as ``key = value`` lines.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePath
from typing import Any, cast

import lib_log_rich.runtime
import orjson
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from chainconf.domain.enums import OutputFormat


def _to_builtin(obj: Any) -> Any:
    """orjson fallback for read-only mappings, sets and paths."""
    if isinstance(obj, Mapping):
        return dict(cast("Mapping[str, Any]", obj))
    if isinstance(obj, (set, frozenset)):
        return sorted(cast("set[Any]", obj), key=repr)
    if isinstance(obj, PurePath):
        return str(obj)
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def _flush_logs() -> None:
    # Keep pending log lines from interleaving with command output.
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Display configuration using lib_layered_config's Rich display.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: TOML-like human output or JSON.
        section: Restrict output to one section.
        console: Optional Rich Console, mainly for tests.
        profile: Profile name included in provenance comments.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    _flush_logs()
    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


def render_value(value: Any) -> str:
    """Serialise a single value as compact JSON.

    Example:
        >>> render_value("hello")
        '"hello"'
        >>> render_value({"b": 1, "a": [True, None]})
        '{"a":[true,null],"b":1}'
    """
    return orjson.dumps(value, default=_to_builtin, option=orjson.OPT_SORT_KEYS).decode()


def display_values(
    values: Mapping[str, Any],
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    console: Console | None = None,
) -> None:
    """Print a mapping returned by the chain.

    Human output prints one ``key = value`` line per key, sorted, with
    values rendered as JSON. JSON output prints an indented object.
    """
    _flush_logs()
    out = console if console is not None else Console(soft_wrap=True, highlight=False)
    if output_format is OutputFormat.JSON:
        options = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS
        payload = orjson.dumps(dict(values), default=_to_builtin, option=options).decode()
        out.print(payload, markup=False)
        return
    for key in sorted(values):
        out.print(f"{key} = {render_value(values[key])}", markup=False)


__all__ = ["display_config", "display_values", "render_value"]
