"""
Logging Configuration Module

This module provides centralized logging configuration for ransel.
All log output goes to standard error; standard output is reserved for the
selected paths and the help text.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Default logging configuration
DEFAULT_LOG_LEVEL = logging.INFO
CONSOLE_LOG_FORMAT = "%(message)s"


class RanselStreamHandler(logging.StreamHandler):
    """Console handler installed by setup_logging."""


def setup_logging(
    log_level: int = DEFAULT_LOG_LEVEL,
    *,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Set up logging for a ransel run.

    Args:
        log_level: Logging level
        stream: Stream for the console handler (standard error if None)

    Returns:
        Configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(log_level)

    cleanup_logging(logger)

    console_handler = RanselStreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger


def cleanup_logging(logger: logging.Logger | None = None) -> None:
    """
    Close and detach the handlers installed by setup_logging.

    Handlers added by other code are left in place.
    """
    if logger is None:
        logger = logging.getLogger()

    for handler in logger.handlers[:]:
        if not isinstance(handler, RanselStreamHandler):
            continue
        handler.close()
        logger.removeHandler(handler)
