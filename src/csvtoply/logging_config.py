"""
Logging Configuration
Sets up the 'csvtoply' logger for command line runs.

Library use never calls this; messages then propagate to whatever the host
application configured.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "csvtoply"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def verbosity_level(verbose: bool) -> int:
    """Map the command line ``--verbose`` switch to a logging level."""
    return logging.DEBUG if verbose else logging.INFO


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Route conversion diagnostics to the console and optionally a file.

    Args:
        level: Logging level for the package logger and its handlers.
        log_file: Optional path; the file is truncated on every run.
        stream: Console stream, stderr unless given. Warnings such as the
            multiple-UV-map notice end up here.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # A second main() call in the same process must not double every line
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_make_handler(logging.StreamHandler(stream or sys.stderr), level))
    if log_file:
        logger.addHandler(_make_handler(logging.FileHandler(log_file, mode='w', encoding='utf-8'), level))

    logger.debug(f"Logging at {logging.getLevelName(level)}")
    return logger
