"""Utility functions for genescan.

Example:
    >>> from genescan.utils import setup_logging
    >>> setup_logging(verbosity=2)
"""

from genescan.utils.logging import Timer, get_logger, setup_logging

__all__ = [
    "Timer",
    "get_logger",
    "setup_logging",
]
