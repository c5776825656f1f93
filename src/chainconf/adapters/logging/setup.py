"""Centralized lib_log_rich initialization for all entry points.

Module execution, the console script and tests all call :func:`init_logging`,
which configures the runtime once from the ``[lib_log_rich]`` section and
bridges standard ``logging`` so library modules (the chain among them) can
keep using ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from chainconf import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the [lib_log_rich] config section.

    Unknown keys are kept and forwarded to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(service="chainconf-test").service
        'chainconf-test'
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the [lib_log_rich] section onto a RuntimeConfig.

    The service name falls back to the package name when unset.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(dict(cast("Mapping[str, object]", log_raw)) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime once per process.

    Loads ``.env`` files so ``LOG_*`` variables apply, initialises the
    runtime from *config* and attaches standard logging. Later calls return
    immediately.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
