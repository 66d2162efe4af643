"""Logging configuration for genescan.

Console output goes through rich; an optional file handler always records
debug output.

Example:
    >>> from genescan.utils.logging import setup_logging, get_logger
    >>> setup_logging(verbosity=2)
    >>> logger = get_logger(__name__)
    >>> logger.info("Scanning started")
"""

import logging
import time
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

# =============================================================================
# Constants
# =============================================================================

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

RICH_FORMAT = "%(message)s"

VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}

ROOT_LOGGER = "genescan"


# =============================================================================
# Setup Functions
# =============================================================================


def setup_logging(
    verbosity: int = 1,
    log_file: Path | str | None = None,
    use_rich: bool = True,
) -> logging.Logger:
    """Configure logging for genescan.

    Args:
        verbosity: Verbosity level (0=warning, 1=info, 2=debug).
        log_file: Optional file to log to.
        use_rich: Use rich for console output.

    Returns:
        The configured package logger.
    """
    level = VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.handlers.clear()

    # Log to stderr so gene output on stdout stays clean
    if use_rich:
        console_handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=False,
            show_path=False,
        )
        console_handler.setFormatter(logging.Formatter(RICH_FORMAT))
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module."""
    return logging.getLogger(name)


# =============================================================================
# Timing Utilities
# =============================================================================


class Timer:
    """Context manager for timing operations.

    Example:
        >>> with Timer("Scanning", logger):
        ...     find_genes(sequence)
        # Logs: "Scanning completed in 0.12s"
    """

    def __init__(self, description: str, logger: logging.Logger | None = None) -> None:
        self.description = description
        self.logger = logger or get_logger(ROOT_LOGGER)
        self.start_time: float = 0
        self.elapsed: float = 0

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.elapsed = time.perf_counter() - self.start_time
        self.logger.debug(f"{self.description} completed in {self.elapsed:.2f}s")
