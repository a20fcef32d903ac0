"""Library configuration: Config, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from failure_or._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
    'reset',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_FALSY = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class Config:
    """Process-wide settings for failure-or.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        log_captures: Emit a ``failure.captured`` event whenever a capture
            boundary turns an exception into a failure.
        json_logs: Render logs as JSON instead of colored console output.
    """

    log_level: str | None = None
    log_captures: bool = True
    json_logs: bool = True


_config: Config | None = None


def _resolve_level(level: str | None) -> str | None:
    """Normalize a level name, falling back to INFO for unknown names."""
    if level is None or not level.strip():
        return None
    normalized = level.strip().upper()
    if normalized not in _LEVELS:
        logging.warning("Unknown log level '%s', defaulting to INFO", level)
        return 'INFO'
    return normalized


def _detect_log_level() -> str | None:
    """Read FAILURE_OR_LOG_LEVEL from the environment."""
    return _resolve_level(os.environ.get('FAILURE_OR_LOG_LEVEL'))


def _detect_log_captures() -> bool:
    """Read FAILURE_OR_LOG_CAPTURES from the environment (default on)."""
    value = os.environ.get('FAILURE_OR_LOG_CAPTURES', '').strip().lower()
    return value not in _FALSY


def init(
    log_level: str | None = None,
    *,
    log_captures: bool | None = None,
    json_logs: bool = True,
) -> Config:
    """Initialize failure-or with the given settings.

    Args:
        log_level: Logging level. Read from FAILURE_OR_LOG_LEVEL if None.
        log_captures: Log captured exceptions. Read from
            FAILURE_OR_LOG_CAPTURES if None.
        json_logs: Emit JSON logs when logging is configured.

    Returns:
        The Config that was set.

    Example:
        ```python
        import failure_or

        failure_or.init(log_level='DEBUG', json_logs=False)
        failure_or.FailureOr.from_(lambda: 1 / 0)  # logs failure.captured
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = _resolve_level(log_level) if log_level is not None else _detect_log_level()
    resolved_captures = _detect_log_captures() if log_captures is None else log_captures

    _config = Config(
        log_level=resolved_level,
        log_captures=resolved_captures,
        json_logs=json_logs,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> Config:
    """Get the current configuration, or the defaults if init() was never called."""
    if _config is None:
        return Config()
    return _config


def reset() -> None:
    """Forget any configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
