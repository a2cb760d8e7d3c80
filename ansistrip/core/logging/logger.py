"""ansistrip logger."""

import logging

from ansistrip.core.logging import formatter, levels, utils


class AnsiStripLogger(logging.Logger):
    """Logger used throughout the CLI.

    Obtain it through ``configure_logging`` so that the class is
    registered before the named logger is created.
    """

    def __init__(self, name: str, level: int = logging.NOTSET) -> None:
        super().__init__(name, level)
        self._log_level = levels.LogLevel.INFO
        self._formatter: formatter.AnsiStripLogFormatter | None = None

    def info(self, msg: object, *args: object, **kwargs) -> None:
        """Log an info message."""
        self._log_with_stacklevel(
            super().info, msg, *args, level=logging.INFO, **kwargs
        )

    def warn(self, msg: object, *args: object, **kwargs) -> None:
        """Log a warning message."""
        self._log_with_stacklevel(
            super().warning, msg, *args, level=logging.WARNING, **kwargs
        )

    def warning(self, msg: object, *args: object, **kwargs) -> None:
        """Log a warning message."""
        self.warn(msg, *args, **kwargs)

    def error(self, msg: object, *args: object, **kwargs) -> None:
        """Log an error message."""
        self._log_with_stacklevel(
            super().error, msg, *args, level=logging.ERROR, **kwargs
        )

    def debug(self, msg: object, *args: object, **kwargs) -> None:
        """Log a debug message."""
        self._log_with_stacklevel(
            super().debug, msg, *args, level=logging.DEBUG, **kwargs
        )

    def set_level(self, level: levels.LogLevel) -> None:
        """Set the log level for the logger and its user-facing handler."""
        self._log_level = level
        self.setLevel(level.py_level)
        for handler in self.handlers:
            handler.setLevel(level.py_level)
        if self._formatter:
            self._formatter.always_verbose = level == levels.LogLevel.DEBUG

    @property
    def log_level(self) -> levels.LogLevel:
        """The level of the user-facing handler."""
        return self._log_level

    def _log_with_stacklevel(self, super_method, *args: object, **kwargs) -> None:
        level = kwargs.pop("level", self.level)
        msg, *log_args = args
        msg_str = str(msg).strip()
        if not msg_str:
            return

        kwargs.setdefault("stacklevel", 3)

        # The caller is only useful in verbose output.
        if self._log_level is levels.LogLevel.DEBUG and level in (
            logging.DEBUG,
            logging.INFO,
        ):
            kwargs.setdefault("extra", {})
            kwargs["extra"]["fq_caller"] = utils.get_caller_fq_name(
                stacklevel=kwargs["stacklevel"]
            )

        super_method(msg_str, *log_args, **kwargs)
