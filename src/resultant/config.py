"""Process-wide configuration: which exceptions are captured, and logging."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from resultant._logging import configure_logging

__all__ = [
    "ResultantConfig",
    "get_config",
    "init",
]

_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class ResultantConfig:
    """Configuration for resultant.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None leaves logging
            to the application.
        json_logs: Render logs as JSON when resultant configures logging.
        capture: Exception types turned into failures at capture boundaries
            (builders, the tuple bridge, awaited inputs). Anything else
            propagates.
    """

    log_level: str | None = None
    json_logs: bool = True
    capture: tuple[type[BaseException], ...] = (Exception,)


# Global configuration (set by init() or built from the environment)
_config: ResultantConfig | None = None


def _from_env() -> ResultantConfig:
    """Build configuration from environment variables.

    - RESULTANT_LOG_LEVEL: logging level, unset means no logging setup
    - RESULTANT_JSON_LOGS: "0"/"false"/"no"/"off" selects console output
    """
    log_level = os.environ.get("RESULTANT_LOG_LEVEL", "").strip().upper() or None
    json_env = os.environ.get("RESULTANT_JSON_LOGS", "").strip().lower()
    if log_level is not None and not isinstance(logging.getLevelName(log_level), int):
        logging.warning("Unknown RESULTANT_LOG_LEVEL value '%s', defaulting to INFO", log_level)
        log_level = "INFO"
    return ResultantConfig(log_level=log_level, json_logs=json_env not in _FALSE_VALUES)


def _validate_capture(capture: tuple[type[BaseException], ...]) -> tuple[type[BaseException], ...]:
    capture = tuple(capture)
    if not capture:
        msg = "capture must name at least one exception type"
        raise ValueError(msg)
    for exc_type in capture:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            msg = f"capture entries must be exception types, got {exc_type!r}"
            raise TypeError(msg)
    return capture


def init(
    log_level: str | None = None,
    *,
    json_logs: bool = True,
    capture: tuple[type[BaseException], ...] | None = None,
) -> ResultantConfig:
    """Set the process-wide configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.
        json_logs: Use JSON rendering when configuring logging.
        capture: Exception types captured as failures. Defaults to (Exception,).

    Returns:
        The ResultantConfig that was set.

    Example:
        ```python
        import resultant.config

        resultant.config.init(log_level="DEBUG", capture=(ValueError, OSError))
        ```
    """
    global _config  # noqa: PLW0603

    _config = ResultantConfig(
        log_level=log_level,
        json_logs=json_logs,
        capture=_validate_capture(capture) if capture is not None else (Exception,),
    )

    if log_level is not None:
        configure_logging(log_level, json_output=json_logs)

    return _config


def get_config() -> ResultantConfig:
    """Get the current configuration, building it from the environment on first use."""
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _from_env()
        if _config.log_level is not None:
            configure_logging(_config.log_level, json_output=_config.json_logs)
    return _config
