"""Static package metadata surfaced to CLI commands and documentation.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

name = "chainconf"
title = "Priority chain of configuration sources with read fallback and write propagation"
version = "1.0.0"
author = "Alexandre Salomé, Julien Didier"
shell_command = "chainconf"

# lib_layered_config identifiers: platform paths are derived from these.
LAYEREDCONF_VENDOR: str = "Gitonomy"
LAYEREDCONF_APP: str = "Chainconf"
LAYEREDCONF_SLUG: str = "chainconf"


def print_info() -> None:
    """Print the summary metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        <BLANKLINE>
        Info for chainconf:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n" + "\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
