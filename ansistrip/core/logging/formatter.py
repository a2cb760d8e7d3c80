"""Log formatter for the ansistrip logger."""

import logging
import os
import shutil
import sys
import textwrap

from click import style

from ansistrip.core.logging.levels import LogLevel

DEFAULT_INDENT = " " * 5


def get_terminal_width() -> int:
    """Get the terminal width."""
    return shutil.get_terminal_size(fallback=(80, 24)).columns


class AnsiStripLogFormatter(logging.Formatter):
    """Prefix each record with its level marker.

    Continuation lines are indented to line up under the first one. When
    stderr is a terminal the prefix is colored and long lines are wrapped.
    """

    def __init__(self, always_verbose: bool = False):
        super().__init__()
        self.always_verbose = always_verbose
        self.enable_color = sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record for output.

        Parameters
        ----------
        record : logging.LogRecord
            The log record to format.

        Returns
        -------
        str
            The formatted message, or an empty string for blank messages.
        """
        msg = record.getMessage()
        if not msg.strip():
            return ""

        left = self._get_left_prefix(record, self._get_prefix(record))
        lines = msg.splitlines()
        if self.enable_color:
            return self._wrap_lines(lines, left)
        return "\n".join(
            [f"{left}{lines[0]}"] + [f"{DEFAULT_INDENT}{line}" for line in lines[1:]]
        )

    def _get_prefix(self, record: logging.LogRecord) -> str:
        level = LogLevel.for_levelno(record.levelno)
        if self.enable_color:
            return style(level.prefix, fg=level.color, bold=True)
        return level.prefix

    def _get_left_prefix(self, record: logging.LogRecord, prefix: str) -> str:
        """Append the caller location in verbose mode."""
        if not (self.always_verbose or record.levelno == logging.DEBUG):
            return prefix
        fq_caller = getattr(record, "fq_caller", "")
        if fq_caller:
            return f"{prefix}{fq_caller} "
        if record.pathname:
            return f"{prefix}{os.path.basename(record.pathname)}:{record.lineno} "
        return prefix

    def _wrap_lines(self, lines: list[str], left: str) -> str:
        width = get_terminal_width()
        wrapped = []
        for i, line in enumerate(lines):
            wrapper = textwrap.TextWrapper(
                width=width,
                initial_indent=left if i == 0 else DEFAULT_INDENT,
                subsequent_indent=DEFAULT_INDENT,
            )
            wrapped.append(wrapper.fill(line))
        return "\n".join(wrapped)
