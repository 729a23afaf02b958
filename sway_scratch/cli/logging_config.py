"""Logging configuration for the sway-scratch CLI.

Provides:
- Configurable log levels (WARNING, INFO with --verbose, DEBUG with --debug)
- Colored level names when stderr is a terminal
- A single 'sway_scratch' logger namespace shared by every module
"""

import logging
import sys


# Default log format
DEFAULT_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"

LOGGER_NAME = "sway_scratch"


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        """Format log record with colors."""
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Configure logging for the CLI.

    Args:
        verbose: Enable verbose logging (INFO level)
        debug: Enable debug logging (DEBUG level)

    Returns:
        Configured package logger

    Examples:
        >>> logger = setup_logging(verbose=True)
        >>> logger.info("Toggling scratchpad")
        2026-01-12 10:30:45 [INFO] sway_scratch: Toggling scratchpad
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Remove existing handlers
    logger.handlers.clear()

    if debug:
        logger.setLevel(logging.DEBUG)
        log_format = DEBUG_FORMAT
    elif verbose:
        logger.setLevel(logging.INFO)
        log_format = VERBOSE_FORMAT
    else:
        logger.setLevel(logging.WARNING)
        log_format = DEFAULT_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logger.level)

    # Use colored formatter if terminal supports it
    if sys.stderr.isatty():
        formatter = ColoredFormatter(log_format)
    else:
        formatter = logging.Formatter(log_format)

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
