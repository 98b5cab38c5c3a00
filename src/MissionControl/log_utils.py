"""Logging setup for Mission Control."""
import logging
import sys
from typing import Optional

from MissionControl.config import get_config

LOGGER_NAME = "MissionControl"


def enable_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Enable logging for the Mission Control libraries.
    Useful when debugging relay gating from a console or notebook.

    Args:
        level: Logging level (defaults to the configured log_level)

    Returns:
        The library logger
    """
    config = get_config()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level if level is not None else config.log_level_number)

    # Check if handler already exists to avoid duplicates
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(config.log_format))
        logger.addHandler(handler)

    return logger
