"""
Logging Configuration
Sets up the package logger for command-line tools.

Library modules only create `logging.getLogger(__name__)` loggers; nothing is
configured until a CLI calls `setup_logging`.
"""
import logging
import sys
from typing import Optional, TextIO


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configures the logger for the 'insertion_tsp' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        stream: Console stream, stdout by default. Tools that print their
            result on stdout pass sys.stderr.
    """
    logger = logging.getLogger("insertion_tsp")
    logger.setLevel(level)

    # Avoid duplicate handlers when a CLI entry point is invoked twice in one process
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


def level_from_name(name: str) -> int:
    """Map a level name such as 'debug' or 'INFO' to its numeric value."""
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {name!r}")
    return level
