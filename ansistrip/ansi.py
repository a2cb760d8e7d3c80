"""Strip ANSI escape sequences from strings.

The scanner is a small state machine that walks the input once and splits
it into runs of literal text and runs of escape-sequence characters. Only
CSI sequences (``ESC [ <params> <final>``) and bare two-character escapes
are recognized by default. Passing ``strings=True`` also recognizes the
string-terminated families (OSC, DCS, SOS, PM, APC).

The scanner never raises: truncated or malformed sequences are dropped
rather than passed through.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, NamedTuple

ESC = "\x1b"
BEL = "\x07"
CSI = "["
OSC = "]"
ST_CHAR = "\\"
STRING_INTRODUCERS = frozenset("PX^_")  # DCS, SOS, PM, APC

PARAM_MIN, PARAM_MAX = "\x30", "\x3f"
FINAL_MIN, FINAL_MAX = "\x40", "\x7e"


class State(Enum):
    """Scanner states.

    Only the first three are reachable unless string-terminated sequences
    are enabled.
    """

    NORMAL = "normal"
    ESCAPE_SEEN = "escape_seen"
    IN_SEQUENCE = "in_sequence"
    IN_OSC = "in_osc"
    OSC_MAYBE_ST = "osc_maybe_st"
    IN_STRING = "in_string"
    STRING_MAYBE_ST = "string_maybe_st"


class Token(NamedTuple):
    """A maximal run of characters that are either all emitted or all dropped."""

    text: str
    literal: bool


def _advance(state: State, char: str, strings: bool) -> State:
    """Return the state following ``char`` for any state other than NORMAL."""
    if state is State.ESCAPE_SEEN:
        if char == CSI:
            return State.IN_SEQUENCE
        if strings and char == OSC:
            return State.IN_OSC
        if strings and char in STRING_INTRODUCERS:
            return State.IN_STRING
        # Bare escape: the escape and this character are both dropped.
        return State.NORMAL

    if state is State.IN_SEQUENCE:
        if PARAM_MIN <= char <= PARAM_MAX:
            return State.IN_SEQUENCE
        # A final byte ends the sequence. Anything else is malformed and
        # ends it too.
        return State.NORMAL

    if state is State.IN_OSC:
        if char == BEL:
            return State.NORMAL
        return State.OSC_MAYBE_ST if char == ESC else State.IN_OSC

    if state is State.OSC_MAYBE_ST:
        if char in (ST_CHAR, BEL):
            return State.NORMAL
        return State.OSC_MAYBE_ST if char == ESC else State.IN_OSC

    if state is State.IN_STRING:
        return State.STRING_MAYBE_ST if char == ESC else State.IN_STRING

    if state is State.STRING_MAYBE_ST:
        if char == ST_CHAR:
            return State.NORMAL
        return State.STRING_MAYBE_ST if char == ESC else State.IN_STRING

    raise AssertionError(f"Unhandled scanner state: {state}")


def tokenize(value: str, strings: bool = False) -> Iterator[Token]:
    """
    Split a string into literal and escape-sequence runs.

    Parameters
    ----------
    value : str
        Input string possibly containing ANSI escape codes.
    strings : bool, optional
        If True, also recognize OSC, DCS, SOS, PM and APC sequences.

    Yields
    ------
    Token
        Consecutive runs covering the whole input. Joining the ``text`` of
        every token reproduces ``value`` exactly. A trailing unterminated
        sequence is yielded as a non-literal token.
    """
    state = State.NORMAL
    start = 0
    for index, char in enumerate(value):
        if state is State.NORMAL:
            if char == ESC:
                if index > start:
                    yield Token(value[start:index], True)
                start = index
                state = State.ESCAPE_SEEN
            continue

        state = _advance(state, char, strings)
        if state is State.NORMAL:
            yield Token(value[start : index + 1], False)
            start = index + 1

    if start < len(value):
        yield Token(value[start:], state is State.NORMAL)


def iter_text(value: str, strings: bool = False) -> Iterator[str]:
    """Yield the runs of literal text in ``value``, in order."""
    for token in tokenize(value, strings=strings):
        if token.literal:
            yield token.text


def strip_ansi(value: str = "", strings: bool = False) -> str:
    """
    Remove ANSI escape sequences from the given string.

    Parameters
    ----------
    value : str, optional
        Input string possibly containing ANSI escape codes.
    strings : bool, optional
        If True, also strip string-terminated sequences such as terminal
        titles and hyperlinks (OSC) and device control strings (DCS).

    Returns
    -------
    str
        The cleaned string with ANSI codes removed.
    """
    if not value:
        return ""
    return "".join(iter_text(value, strings=strings))


class AnsiStr(str):
    """A ``str`` that can strip its own escape sequences.

    Examples
    --------
    >>> AnsiStr("\\x1b[31mred\\x1b[0m").strip_ansi()
    'red'
    """

    def strip_ansi(self, strings: bool = False) -> AnsiStr:
        """Return a copy with ANSI escape sequences removed."""
        return AnsiStr(strip_ansi(str(self), strings=strings))

    def fragments(self, strings: bool = False) -> Iterator[str]:
        """Yield the runs of literal text in this string."""
        return iter_text(str(self), strings=strings)
