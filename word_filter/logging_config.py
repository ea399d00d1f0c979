"""
Logging setup for word-filter.

Library modules only call ``logging.getLogger(__name__)``. Handlers are
attached to the ``word_filter`` logger here, once, by the command line tool
or by a caller that wants the package's own output format. A log file is
written only when one is requested or debug mode is on (debug logs go to
~/.word_filter/logs/).
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union


_logging_initialized = False

LOGGER_NAME = "word_filter"

LOG_DIR = Path.home() / ".word_filter" / "logs"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_log_dir() -> Path:
    """Log directory, created on first use."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return LOG_DIR


def _rotating_handler(
    path: Union[str, Path],
    max_bytes: int,
    backups: int,
    level: int,
    fmt: str,
) -> logging.Handler:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
    force: bool = False,
    debug_mode: bool = False,
) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Args:
        level: Level name; unknown names fall back to INFO
        log_file: Extra log file, rotated at 5MB
        console: Log to stderr
        force: Reconfigure even when already set up
        debug_mode: DEBUG level plus a detailed rotating file in the log dir

    Returns:
        The ``word_filter`` logger
    """
    global _logging_initialized

    package_logger = logging.getLogger(LOGGER_NAME)
    if _logging_initialized and not force:
        return package_logger

    log_level = logging.DEBUG if debug_mode else getattr(logging, level.upper(), logging.INFO)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()

    if console:
        stream = logging.StreamHandler(sys.stderr)
        stream.setLevel(log_level)
        stream.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(stream)

    if log_file:
        package_logger.addHandler(
            _rotating_handler(log_file, 5 * 1024 * 1024, 3, log_level, LOG_FORMAT)
        )

    if debug_mode:
        package_logger.addHandler(_rotating_handler(
            get_log_dir() / "word_filter_debug.log",
            10 * 1024 * 1024, 2, logging.DEBUG, DEBUG_FORMAT,
        ))

    _logging_initialized = True
    package_logger.debug(f"Logging ready: level={logging.getLevelName(log_level)}, "
                         f"file={log_file or 'none'}")
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, setting up package logging with defaults first.

    Usage:
        from word_filter.logging_config import get_logger
        logger = get_logger(__name__)
    """
    if not _logging_initialized:
        setup_logging()
    return logging.getLogger(name)


def enable_debug_logging() -> None:
    """Switch to debug logging at runtime."""
    setup_logging(level="DEBUG", debug_mode=True, force=True)
