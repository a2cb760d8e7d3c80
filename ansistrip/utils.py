"""Utility functions for the ansistrip CLI."""

from __future__ import annotations

import logging
import os
import sys
import traceback
from functools import wraps
from importlib.metadata import PackageNotFoundError, version
from inspect import signature
from typing import Any, Optional

from click import echo, make_pass_decorator

from ansistrip.core.errors import AnsiStripError, UserError
from ansistrip.core.logging.levels import LogLevel
from ansistrip.core.logging.utils import LOGGER_NAME
from ansistrip.settings import FALSE_VALUES, LOG_LEVELS, TRUE_VALUES


# ----------------------------------------------------------------------
# CLI Decorators & Exception Handling
# ----------------------------------------------------------------------
def pass_environment() -> Any:
    """
    Return a Click pass decorator for the AnsiStripContext.

    Returns
    -------
    Any
        A decorator that passes the AnsiStripContext instance.
    """
    from ansistrip.core.context import AnsiStripContext

    return make_pass_decorator(AnsiStripContext, ensure=True)


def handle_exception(
    error: BaseException,
    ctx: Optional[Any] = None,
    additional_msg: str = "",
) -> None:
    """
    Log an exception and exit with its exit code.

    Parameters
    ----------
    error : BaseException
        The exception object.
    ctx : Optional[Any]
        Optional CLI context object with a logger.
    additional_msg : str
        Additional message to log, if any.

    Raises
    ------
    SystemExit
        Always; carries the error's exit code.
    """
    if isinstance(error, AnsiStripError):
        error_msg = error.msg
        exit_code = error.exit_code
        show_traceback = error.show_traceback
    else:
        error_msg = str(error) or error.__class__.__name__
        exit_code = 1
        show_traceback = True

    tb = error.__traceback__
    while tb and tb.tb_next:
        tb = tb.tb_next
    if tb:
        frame = tb.tb_frame
        filename = os.path.basename(frame.f_code.co_filename)
        module = frame.f_globals.get("__name__", "")
        origin = f"{module}:{filename}:{tb.tb_lineno}"
    else:
        origin = "unknown:unknown:0"

    logger = getattr(ctx, "logger", None) or logging.getLogger(LOGGER_NAME)
    logger.error(f"[Origin: {origin}]{additional_msg} {error_msg}")

    if show_traceback:
        lines = traceback.format_exception(type(error), error, error.__traceback__)
        echo("".join(lines), err=True)

    sys.exit(exit_code)


def exception_handler(func: Any) -> Any:
    """
    Route unhandled exceptions through ``handle_exception``.

    Parameters
    ----------
    func : Callable
        The function to wrap.

    Returns
    -------
    Callable
        The wrapped function.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx = kwargs.get("ctx")
        if ctx is None and "ctx" in signature(func).parameters:
            ctx_index = list(signature(func).parameters).index("ctx")
            if len(args) > ctx_index:
                ctx = args[ctx_index]
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except BaseException as e:
            handle_exception(e, ctx)

    return wrapper


# ----------------------------------------------------------------------
# Parsing & Validation Utilities
# ----------------------------------------------------------------------
def parse_key_value_pair(pair: str) -> tuple[str, str]:
    """
    Parse a ``KEY=VALUE`` string.

    Parameters
    ----------
    pair : str
        Key-value pair to parse.

    Returns
    -------
    tuple[str, str]
        Tuple of key and value. The value may be empty.

    Raises
    ------
    UserError
        If the pair has no ``=`` or no key.
    """
    pair = pair.strip()
    key, sep, value = pair.partition("=")
    if not sep or not key.strip():
        raise UserError(
            f"Invalid key-value pair: '{pair}'",
            "Environment overrides must be formatted as KEY=VALUE.",
        )
    return key.strip(), value.strip()


def parse_bool(value: str, name: str = "value") -> bool:
    """
    Interpret a setting as a boolean.

    Parameters
    ----------
    value : str
        Raw setting value. An empty string is False.
    name : str, optional
        Setting name used in the error message.

    Raises
    ------
    UserError
        If the value is not a recognized boolean.
    """
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise UserError(
        f"Invalid boolean for {name}: '{value}'",
        "Use one of: true, false, yes, no, on, off, 1, 0.",
    )


def parse_log_level(value: str) -> LogLevel:
    """
    Interpret a setting as a ``LogLevel``.

    Raises
    ------
    UserError
        If the value does not name a log level.
    """
    level = LogLevel.from_name(value)
    if level is None:
        raise UserError(
            f"Invalid log level: '{value}'",
            f"Use one of: {', '.join(LOG_LEVELS)}.",
        )
    return level


# ----------------------------------------------------------------------
# Version Helpers
# ----------------------------------------------------------------------
def cli_ver() -> str:
    """
    Return the CLI version.

    Returns
    -------
    str
        CLI version, or "unknown" when the package is not installed.
    """
    try:
        return version("ansistrip")
    except PackageNotFoundError:
        return "unknown"
