"""Library configuration: Config, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from bindable._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'BINDABLE_LOG_LEVEL'
LOG_FORMAT_ENV = 'BINDABLE_LOG_FORMAT'


@dataclass(frozen=True)
class Config:
    """Configuration for bindable.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render log entries as JSON (True) or for the console (False).
    """

    log_level: str | None = None
    json_logs: bool = True


_config: Config | None = None


def _detect_log_level() -> str | None:
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read the log format from the environment.

    Accepts "json" or "console"; anything else falls back to JSON.
    """
    fmt = os.environ.get(LOG_FORMAT_ENV, '').lower()
    if fmt in ('', 'json'):
        return True
    if fmt == 'console':
        return False
    logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, fmt)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> Config:
    """Initialize bindable with the given configuration.

    Args:
        log_level: Logging level. Read from BINDABLE_LOG_LEVEL if None.
        json_logs: JSON vs console rendering. Read from BINDABLE_LOG_FORMAT if None.

    Returns:
        The Config that was set.

    Example:
        ```python
        import bindable

        bindable.init(log_level='DEBUG', json_logs=False)
        bindable.parse_text('{oops')  # logs the caught DecodeError
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = Config(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'bindable not initialized. Call bindable.init() first.'
        raise RuntimeError(msg)
    return _config
