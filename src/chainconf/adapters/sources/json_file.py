"""JSON file backed configuration source.

The file holds a single flat JSON object. It is re-read on every operation
so several processes observe each other's writes, and written atomically
(temporary sibling file, then rename) so readers never see a partial file.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

import orjson

from ...domain.errors import ConfigurationError

_DUMP_OPTIONS = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS


class JsonFileSource:
    """Writable source persisting its values to a JSON file.

    A missing file reads as empty; it is created on the first write.

    Args:
        path: Location of the JSON file. ``~`` is expanded.

    Raises:
        ConfigurationError: On read, when the file does not hold a JSON object.
        orjson.JSONDecodeError: On read, when the file is not valid JSON.
        orjson.JSONEncodeError: On write, when a value is not serialisable.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path).expanduser()

    def __repr__(self) -> str:
        return f"JsonFileSource({str(self.path)!r})"

    def _load(self) -> dict[str, Any]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return {}
        if not raw.strip():
            return {}
        data = orjson.loads(raw)
        if not isinstance(data, dict):
            raise ConfigurationError(f"{self.path} must contain a JSON object, found {type(data).__name__}")
        return cast("dict[str, Any]", data)

    def _store(self, values: Mapping[str, Any]) -> None:
        payload = orjson.dumps(dict(values), option=_DUMP_OPTIONS)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        values = self._load()
        values[key] = value
        self._store(values)

    def remove(self, key: str) -> None:
        values = self._load()
        if key in values:
            del values[key]
            self._store(values)

    def all(self) -> dict[str, Any]:
        return self._load()

    def set_all(self, values: Mapping[str, Any]) -> None:
        self._store(values)

    def merge(self, values: Mapping[str, Any]) -> None:
        merged = self._load()
        merged.update(values)
        self._store(merged)


__all__ = ["JsonFileSource"]
