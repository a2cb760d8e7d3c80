"""Error classes for the ansistrip CLI."""


class AnsiStripError(Exception):
    """Base exception class for all ansistrip errors.

    Parameters
    ----------
    msg : str, optional
        Message to log and include in the exception.

    Attributes
    ----------
    msg : str
        Error message associated with the exception.
    exit_code : int
        Exit code for the error type. Defaults to 1.
    show_traceback : bool
        Whether the exception handler echoes a traceback for this error.
    """

    exit_code = 1
    show_traceback = True

    def __init__(self, msg: str = "") -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        """Return the error message as a string."""
        return self.msg


class StreamError(AnsiStripError):
    """Failure reading input or writing output.

    The stripping itself cannot fail, so this is the only runtime error
    the CLI expects to see outside of bad user input.
    """

    show_traceback = False


class UserError(AnsiStripError):
    """User errors that ansistrip can safely log and display.

    Parameters
    ----------
    msg : str, optional
        Message to log and include in the exception.
    hint_msg : str, optional
        Additional guidance for resolving the issue.
    """

    exit_code = 2
    show_traceback = False

    def __init__(self, msg: str = "", hint_msg: str = "") -> None:
        if hint_msg:
            super().__init__(f"User error: {msg}\nHint: {hint_msg}")
        else:
            super().__init__(f"User error: {msg}")
