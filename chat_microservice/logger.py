"""
Logger factory shared by every module of the service.

Usage:
    from .logger import get_logger
    logger = get_logger(__name__)
    logger.info("Something happened")
"""

import logging
import sys
from typing import Optional

from .config import get_settings


settings = get_settings()


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Create and return a named logger with a standard formatter.

    If ``level`` is None the level comes from ``settings.log_level``.
    """
    resolved_level = level if level is not None else logging.getLevelName(settings.log_level.upper())
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO
    logger = logging.getLogger(name)

    # Handlers are attached once per logger name
    if not logger.handlers:
        logger.setLevel(resolved_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(resolved_level)
        console_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(console_handler)
        logger.propagate = False

    return logger
