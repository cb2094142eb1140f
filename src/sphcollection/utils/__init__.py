"""
Utility functions for sphcollection.
"""

from sphcollection.utils.log import LOGGER_NAME, setup_logging

__all__ = [
    "LOGGER_NAME",
    "setup_logging",
]
