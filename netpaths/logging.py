"""Logging for netpaths.

Every module logs through a child of the ``netpaths`` logger obtained with
``get_logger(__name__)``. Only the package logger owns a handler; children
carry no level of their own, so one call to ``set_global_log_level`` changes
what the whole package emits.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "netpaths"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the single handler of the ``netpaths`` logger.

    Only the first call after import (or after ``reset_logging``) has an
    effect.

    Args:
        level: Package log level.
        format_string: Record format; ``DEFAULT_FORMAT`` when omitted.
        handler: Destination; a stderr stream when omitted, leaving stdout to
            the command line output.
    """
    global _configured
    if _configured:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package = _package_logger()
    package.handlers[:] = [handler]
    package.setLevel(level)
    # Records still reach the root logger, where pytest's caplog listens
    package.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name``, inheriting the package level."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handlers."""
    setup_root_logger()
    package = _package_logger()
    package.setLevel(level)
    for handler in package.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level so setup can run again."""
    global _configured
    _configured = False
    package = _package_logger()
    package.handlers.clear()
    package.setLevel(logging.NOTSET)


setup_root_logger()
