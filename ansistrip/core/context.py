"""Core context for the ansistrip CLI."""

import os

from ansistrip import utils
from ansistrip.core.envvars import EnvironmentVariables
from ansistrip.core.errors import AnsiStripError
from ansistrip.core.logging.levels import LogLevel
from ansistrip.core.logging.logger import AnsiStripLogger
from ansistrip.core.logging.utils import configure_logging
from ansistrip.settings import CONFIG_FILE, CONFIG_PATH_VAR, USER_DIR


class AnsiStripContext:
    """Expose user input and resolved settings to the CLI.

    Attributes
    ----------
    logger : AnsiStripLogger
        Logs CLI activity to stderr.
    env : EnvironmentVariables
        Resolved settings. Populated by `initialize()`.
    strings : bool
        Whether string-terminated sequences (OSC, DCS, ...) are stripped.
    log_level : LogLevel
        Effective log level.
    user_home_dir : str
        Home directory of the current user.
    config_file : str
        Path to the user's ansistrip.cfg file.
    """

    def __init__(self):
        # ---- User-provided inputs ----
        self._user_env_args: list[str] = []

        self.logger: AnsiStripLogger = configure_logging()
        self.env: EnvironmentVariables | None = None
        self.strings = False
        self.log_level = LogLevel.INFO
        self.user_home_dir = os.path.expanduser("~")
        self._initialized = False

    @property
    def config_file(self) -> str:
        """Path to ``ansistrip.cfg``, overridable with ``ANSISTRIP_CONFIG``."""
        override = os.environ.get(CONFIG_PATH_VAR, "")
        if override:
            return os.path.abspath(os.path.expanduser(override))
        return os.path.join(self.user_home_dir, USER_DIR, CONFIG_FILE)

    def initialize(
        self,
        log_level: LogLevel | None = None,
        strings: bool | None = None,
    ) -> None:
        """Resolve settings and apply them.

        Parameters
        ----------
        log_level : LogLevel, optional
            Log level from the command line. Falls back to the
            ``LOG_LEVEL`` setting, then INFO.
        strings : bool, optional
            Whether to strip string-terminated sequences, from the command
            line. Falls back to the ``STRINGS`` setting, then False.

        Raises
        ------
        AnsiStripError
            If the context was already initialized.
        UserError
            If a setting has an invalid value.
        """
        if self._initialized:
            raise AnsiStripError("Context has already been initialized.")

        self.env = EnvironmentVariables(self)

        if log_level is None:
            configured = self.env.get("LOG_LEVEL")
            log_level = utils.parse_log_level(configured) if configured else None
        self.log_level = log_level or LogLevel.INFO
        self.logger.set_level(self.log_level)

        if strings is None:
            strings = utils.parse_bool(self.env.get("STRINGS"), "STRINGS")
        self.strings = strings

        self.env._log_env_vars()
        self.logger.debug(
            f"Config file: {self.config_file}; strip string sequences: {self.strings}"
        )
        self._initialized = True
