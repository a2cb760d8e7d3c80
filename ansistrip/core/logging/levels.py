"""Log levels for the ansistrip logger."""

from __future__ import annotations

import logging
from enum import Enum

_ALIASES = {"WARNING": "WARN", "CRITICAL": "ERROR"}


class LogLevel(Enum):
    """Verbosity levels accepted by ``--log-level`` and ``LOG_LEVEL``.

    Members are ordered from most to least severe.

    Attributes
    ----------
    prefix : str
        The marker printed before each message.
    color : str
        The click color name for the marker.
    py_level : int
        The stdlib level that handlers filter at.
    """

    ERROR = ("[e]  ", "red", logging.ERROR)
    WARN = ("[w]  ", "yellow", logging.WARNING)
    INFO = ("[i]  ", "cyan", logging.INFO)
    DEBUG = ("[v]  ", "magenta", logging.DEBUG)

    def __init__(self, prefix: str, color: str, py_level: int):
        self.prefix = prefix
        self.color = color
        self.py_level = py_level

    @property
    def debug(self) -> bool:
        """Whether the level shows caller locations."""
        return self is LogLevel.DEBUG

    @classmethod
    def from_name(cls, name: str) -> LogLevel | None:
        """Look up a level by case-insensitive name, or return None."""
        key = name.strip().upper()
        return cls.__members__.get(_ALIASES.get(key, key))

    @classmethod
    def for_levelno(cls, levelno: int) -> LogLevel:
        """Return the level whose marker a stdlib record level gets."""
        for level in cls:
            if levelno >= level.py_level:
                return level
        return cls.DEBUG
