"""
Logging helpers.

Library modules log through ``logging.getLogger(__name__)`` and never
install handlers themselves; applications call :func:`setup_logging`.
"""

import logging
import sys
from typing import Optional

__all__ = [
    "LOGGER_NAME",
    "setup_logging",
]

LOGGER_NAME = "sphcollection"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for the package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to the
            level of the active configuration.

    Returns:
        Configured logger
    """
    if level is None:
        from sphcollection.config import get_config

        level = get_config().logging.level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    # Create console handler if not exists (the package installs a NullHandler)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(getattr(logging, level.upper()))

    return logger
