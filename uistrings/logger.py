"""Logging setup for uistrings."""

import logging
import sys

LOGGER_NAME = "uistrings"


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    return logger
