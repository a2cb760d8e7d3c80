"""Stream handler for the ansistrip logger."""

import logging
import sys


class AnsiStripLogHandler(logging.StreamHandler):
    """User-facing log handler.

    Logs always go to stderr so that stdout carries nothing but stripped
    text.
    """

    @property
    def stream(self):
        """Return the current ``sys.stderr`` rather than a cached reference.

        This keeps CliRunner's capture buffer working during tests.
        """
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass
