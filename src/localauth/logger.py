"""
Logging setup for localauth.

Thin wrapper around loguru so modules can do ``logger = get_logger(__name__)``.
"""

import os
import sys
from typing import Optional

from loguru import logger as _logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure the loguru sinks.

    Args:
        level: Minimum log level. Falls back to $LOG_LEVEL, then INFO.
        log_file: Optional path of an additional rotating log file.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    _logger.remove()
    _logger.configure(extra={"name": "localauth"})
    _logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    if log_file:
        _logger.add(log_file, level=level, format=LOG_FORMAT, rotation="10 MB")


def get_logger(name: str):
    """Return a logger bound to the given module name."""
    return _logger.bind(name=name)
