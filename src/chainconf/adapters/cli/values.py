"""Parse command-line values into chain values."""

from __future__ import annotations

from typing import Any, cast

import orjson


def coerce_value(raw: str) -> Any:
    """Parse *raw* as JSON, falling back to the raw string.

    Examples:
        >>> coerce_value("42"), coerce_value("true"), coerce_value("null")
        (42, True, None)
        >>> coerce_value('["a", 1]')
        ['a', 1]
        >>> coerce_value("plain text")
        'plain text'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_object(raw: str) -> dict[str, Any]:
    """Parse *raw* as a JSON object.

    Raises:
        ValueError: If *raw* is not valid JSON or not an object.

    Examples:
        >>> parse_object('{"x": "1"}')
        {'x': '1'}
        >>> parse_object("[1]")
        Traceback (most recent call last):
        ...
        ValueError: Expected a JSON object, got list
    """
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return cast("dict[str, Any]", data)


__all__ = ["coerce_value", "parse_object"]
