"""
Logging configuration for the Mock Interview service.
Every module gets its own named logger writing to stdout (and optionally a file).
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import LOG_LEVEL, LOG_FILE

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


def setup_logger(
    name: str = "mock_interview",
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Get a named logger, attaching handlers on first use.

    Level and file default to LOG_LEVEL / LOG_FILE from config; with no file
    configured the logger writes to stdout only.

    Example:
        >>> logger = setup_logger("session_manager")
        >>> logger.info("Created interview session")
    """
    level = getattr(logging, (log_level or LOG_LEVEL).upper())
    log_file = log_file or LOG_FILE

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Already configured by an earlier import
    if logger.handlers:
        return logger

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, mode='a'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
