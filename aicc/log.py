"""Logging helpers for aicc.

Diagnostics go to stderr through standard-library loggers; user-facing
output stays on typer.echo. The level comes from AICC_LOG_LEVEL, or DEBUG
when verbose mode is switched on.
"""

import logging
import os

LOG_LEVEL_ENV_VAR = "AICC_LOG_LEVEL"

_FORMAT = "[aicc:%(name)s] %(levelname)s %(message)s"

_REGISTERED_LOGGERS: set[logging.Logger] = set()


def _parse_level_from_env() -> int | None:
    """Return the log level defined in the environment, if any."""
    level_name = os.getenv(LOG_LEVEL_ENV_VAR)
    if not level_name:
        return None

    level = getattr(logging, level_name.upper(), None)
    return level if isinstance(level, int) else None


def get_logger(name: str) -> logging.Logger:
    """Return a logger with aicc's stderr handler attached.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)

    env_level = _parse_level_from_env()
    if env_level is not None:
        logger.setLevel(env_level)

    _REGISTERED_LOGGERS.add(logger)
    return logger


def set_log_level(level_name: str) -> None:
    """Set the log level for every aicc logger created so far.

    Args:
        level_name: A logging level name such as ``"DEBUG"``.
    """
    os.environ[LOG_LEVEL_ENV_VAR] = level_name
    level = _parse_level_from_env()
    if level is None:
        level = logging.NOTSET

    for logger in _REGISTERED_LOGGERS:
        logger.setLevel(level)


def enable_verbose() -> None:
    """Switch every aicc logger to DEBUG."""
    set_log_level("DEBUG")
