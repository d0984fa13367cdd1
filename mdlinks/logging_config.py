"""
Logging configuration for mdlinks.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union


APP_LOGGER = "mdlinks"


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Configure and return the root application logger.

    Logs go to stderr at ``level`` and, if ``log_file`` is set, to that
    file at DEBUG. Stdout is left alone for extracted records.
    """
    logger = logging.getLogger(APP_LOGGER)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(fmt)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the application root."""
    return logging.getLogger(f"{APP_LOGGER}.{name}")
