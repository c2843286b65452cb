"""Centralized logging configuration for the ``ledgerit`` package.

``configure_logging`` attaches a single ``StreamHandler`` to the package root
logger and is called once by the CLI. Library modules only call
``get_logger("ledgerit.<module>")`` and never attach handlers themselves.
"""

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "ledgerit"
_CONFIGURED = False


def _level_from_name(level: Union[int, str, None]) -> Optional[int]:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return None


def _parse_level(level: Union[int, str, None]) -> int:
    numeric = _level_from_name(level)
    if numeric is not None:
        return numeric
    numeric = _level_from_name(os.getenv("LEDGERIT_LOG_LEVEL"))
    if numeric is not None:
        return numeric
    # Prompts share the terminal with log output, so stay quiet by default.
    return logging.WARNING


def configure_logging(
    level: Union[int, str, None] = None,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package root logger exactly once.

    Args:
        level: Level as int or name (e.g. "INFO"). When None, falls back to
            the LEDGERIT_LOG_LEVEL environment variable, then WARNING.
        fmt: Optional format string.
        stream: Output stream for the handler (defaults to stderr).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    numeric_level = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))

    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package silent until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
