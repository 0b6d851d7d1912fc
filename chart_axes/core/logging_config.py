"""Logging for the chart_axes package.

Library modules log through ``logging.getLogger(__name__)`` and never attach
handlers themselves; the command line entry point calls :func:`setup_logging`
once to route the ``chart_axes`` hierarchy to stderr and, optionally, a file.
"""

import logging
import logging.handlers
import sys
from typing import Optional

PACKAGE_LOGGER = "chart_axes"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

# Axis logs are small; a few megabytes covers many renders
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)


def setup_logging(log_level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Route package logs to stderr, and to a rotating file when given one.

    Calling this again replaces the handlers from the previous call.

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stderr), log_level)
    if log_file:
        rotating = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS
        )
        _attach(logger, rotating, log_level)

    logger.debug("Logging to stderr%s at %s", f" and {log_file}" if log_file else "", logging.getLevelName(log_level))
    return logger
