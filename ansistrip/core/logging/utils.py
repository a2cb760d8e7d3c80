"""Logging utilities for ansistrip."""

from __future__ import annotations

import inspect
import logging
import os
from typing import TYPE_CHECKING

from ansistrip.core.logging.levels import LogLevel

if TYPE_CHECKING:
    from ansistrip.core.logging.logger import AnsiStripLogger

LOGGER_NAME = "ansistrip"


def configure_logging(log_level: LogLevel = LogLevel.INFO) -> AnsiStripLogger:
    """
    Create the ansistrip logger or return the existing one.

    Parameters
    ----------
    log_level : LogLevel
        Minimum log level shown to the user.

    Returns
    -------
    AnsiStripLogger
        The configured logger.
    """
    from ansistrip.core.logging.formatter import AnsiStripLogFormatter
    from ansistrip.core.logging.handler import AnsiStripLogHandler
    from ansistrip.core.logging.logger import AnsiStripLogger

    logging.setLoggerClass(AnsiStripLogger)
    try:
        logger = logging.getLogger(LOGGER_NAME)
    finally:
        logging.setLoggerClass(logging.Logger)

    if not isinstance(logger, AnsiStripLogger):
        raise TypeError(
            f"Logger '{LOGGER_NAME}' was created before logging was configured."
        )

    if any(isinstance(h, AnsiStripLogHandler) for h in logger.handlers):
        logger.set_level(log_level)
        return logger

    logger.handlers.clear()
    logger._formatter = AnsiStripLogFormatter(
        always_verbose=log_level == LogLevel.DEBUG
    )

    user_handler = AnsiStripLogHandler()
    user_handler.setFormatter(logger._formatter)
    logger.addHandler(user_handler)
    logger.propagate = False
    logger.set_level(log_level)

    logger.debug("Logger configured.")
    return logger


def get_caller_fq_name(stacklevel: int = 3) -> str:
    """Return ``module:file:line`` for the frame ``stacklevel`` calls up."""
    frame = inspect.currentframe()
    for _ in range(stacklevel):
        if frame is not None:
            frame = frame.f_back
    if frame is None:
        return "<unknown>"
    module = inspect.getmodule(frame)
    module_name = module.__name__ if module else "<unknown>"
    filename = os.path.basename(frame.f_code.co_filename)
    return f"{module_name}:{filename}:{frame.f_lineno}"
