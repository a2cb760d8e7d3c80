"""Read text streams, strip escape sequences, and write the result."""

from __future__ import annotations

import io
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, TextIO

import click

from ansistrip.ansi import strip_ansi
from ansistrip.core.errors import StreamError
from ansistrip.settings import ENCODING, ENCODING_ERRORS, STDIO_PATH

if TYPE_CHECKING:
    from ansistrip.core.context import AnsiStripContext


def stream_name(stream: TextIO) -> str:
    """Return a printable name for a stream."""
    name = getattr(stream, "name", None)
    return str(name) if name is not None else repr(stream)


def _wrap_binary(stream) -> io.TextIOWrapper:
    # newline="" keeps \r and \r\n exactly as they arrive.
    return io.TextIOWrapper(
        stream, encoding=ENCODING, errors=ENCODING_ERRORS, newline=""
    )


@contextmanager
def open_source(path: str) -> Iterator[TextIO]:
    """
    Open an input path, or stdin for ``-``, as text.

    Line endings are passed through untranslated. Standard input is detached
    rather than closed on exit.

    Raises
    ------
    StreamError
        If the file cannot be opened.
    """
    if path == STDIO_PATH:
        stream = _wrap_binary(click.get_binary_stream("stdin"))
        try:
            yield stream
        finally:
            stream.detach()
        return

    try:
        stream = open(path, encoding=ENCODING, errors=ENCODING_ERRORS, newline="")
    except OSError as e:
        raise StreamError(f"Failed to open input {path}: {e}") from e
    with stream:
        yield stream


@contextmanager
def open_sink(path: str) -> Iterator[TextIO]:
    """
    Open an output path, or stdout for ``-``, as text.

    Line endings are written untranslated. Standard output is flushed and
    detached rather than closed on exit.

    Raises
    ------
    StreamError
        If the file cannot be opened or pending output cannot be written.
    """
    if path == STDIO_PATH:
        stream = _wrap_binary(click.get_binary_stream("stdout"))
        try:
            yield stream
        finally:
            try:
                stream.detach()
            except OSError as e:
                raise StreamError(f"Failed to write output to <stdout>: {e}") from e
        return

    try:
        stream = open(
            path, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline=""
        )
    except OSError as e:
        raise StreamError(f"Failed to open output {path}: {e}") from e
    with stream:
        yield stream


def strip_stream(
    source: TextIO,
    sink: TextIO,
    strings: bool = False,
    line_buffered: bool = False,
) -> int:
    """
    Copy ``source`` to ``sink`` without escape sequences.

    Parameters
    ----------
    source : TextIO
        Stream to read.
    sink : TextIO
        Stream to write. It is flushed after each write.
    strings : bool, optional
        Also strip string-terminated sequences (OSC, DCS, SOS, PM, APC).
    line_buffered : bool, optional
        If True, each line is stripped and flushed as soon as it is read,
        with a fresh scan per line. Otherwise the whole input is read and
        stripped as one unit.

    Returns
    -------
    int
        Number of characters removed.

    Raises
    ------
    StreamError
        If reading ``source`` or writing ``sink`` fails.
    """
    name = stream_name(source)
    if not line_buffered:
        return _emit(_read(source, name), sink, strings)
    removed = 0
    for line in _read_lines(source, name):
        removed += _emit(line, sink, strings)
    return removed


def _emit(text: str, sink: TextIO, strings: bool) -> int:
    clean = strip_ansi(text, strings=strings)
    try:
        sink.write(clean)
        sink.flush()
    except OSError as e:
        raise StreamError(f"Failed to write output to {stream_name(sink)}: {e}") from e
    return len(text) - len(clean)


def _read(source: TextIO, name: str) -> str:
    try:
        return source.read()
    except (OSError, UnicodeError) as e:
        raise StreamError(f"Failed to read input from {name}: {e}") from e


def _read_lines(source: TextIO, name: str) -> Iterator[str]:
    while True:
        try:
            line = source.readline()
        except (OSError, UnicodeError) as e:
            raise StreamError(f"Failed to read input from {name}: {e}") from e
        if not line:
            return
        yield line


class StreamStripper:
    """Strip escape sequences from text streams with the context's settings.

    Parameters
    ----------
    ctx : AnsiStripContext
        An initialized context; `ctx.strings` selects the sequence families
        to strip.
    line_buffered : bool, optional
        Passed through to ``strip_stream``.
    """

    def __init__(self, ctx: AnsiStripContext, line_buffered: bool = False) -> None:
        self._ctx = ctx
        self.line_buffered = line_buffered

    def strip(self, source: TextIO, sink: TextIO) -> int:
        """Run ``strip_stream`` on one source and log what was removed."""
        name = stream_name(source)
        self._ctx.logger.debug(
            f"Stripping {name} ({'line' if self.line_buffered else 'whole'} mode)."
        )
        removed = strip_stream(
            source,
            sink,
            strings=self._ctx.strings,
            line_buffered=self.line_buffered,
        )
        self._ctx.logger.debug(f"Removed {removed} characters from {name}.")
        return removed
