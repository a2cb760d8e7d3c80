"""Remove ANSI escape sequences from text."""

from ansistrip.ansi import AnsiStr, iter_text, strip_ansi, tokenize

__all__ = [
    "AnsiStr",
    "iter_text",
    "strip_ansi",
    "tokenize",
]
