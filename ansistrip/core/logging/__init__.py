"""Logging utilities for ansistrip."""

from . import formatter, handler, levels, logger, utils

__all__ = [
    "formatter",
    "handler",
    "levels",
    "logger",
    "utils",
]
