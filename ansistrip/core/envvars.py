"""Settings resolved from CLI overrides, the shell, and the config file."""

from __future__ import annotations

import os
from configparser import ConfigParser
from typing import TYPE_CHECKING, Any

from ansistrip import utils
from ansistrip.settings import CONFIG_SECTION, CONFIG_TEMPLATE, ENV_PREFIX, SETTING_KEYS

if TYPE_CHECKING:
    from ansistrip.core.context import AnsiStripContext


class EnvironmentVariables(dict):
    """ansistrip settings.

    Parameters
    ----------
    ctx : AnsiStripContext
        The context holding user input and the logger.

    Examples
    --------
    >>> ctx.env.get("STRINGS")
    'true'

    Notes
    -----
    Each key is taken from the first source that sets it:

    1. ``--env KEY=VALUE`` arguments.
    2. ``ANSISTRIP_<KEY>`` variables in the shell.
    3. The ``[config]`` section of ``ansistrip.cfg``.
    """

    def __init__(self, ctx: AnsiStripContext) -> None:
        super().__init__()
        self._ctx = ctx
        self._parse_user_env_args()
        self._parse_os_env()
        self._parse_config_file()

    def get(self, key: Any, default: Any = None) -> str:
        """Return the value for ``key`` as a string ("" when unset)."""
        val = super().get(key, default)
        return str(val) if val is not None else ""

    def _strip_quotes(self, value: str) -> str:
        """Remove one pair of matching surrounding quotes."""
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            return value[1:-1]
        return value

    def _parse_user_env_args(self) -> None:
        for env_var in self._ctx._user_env_args:
            k, v = utils.parse_key_value_pair(env_var)
            self[k.upper()] = v

    def _parse_os_env(self) -> None:
        for key in SETTING_KEYS:
            value = os.environ.get(f"{ENV_PREFIX}{key}")
            if value is not None and not self.get(key):
                self[key] = value

    def _parse_config_file(self) -> None:
        """Parse the user's ``ansistrip.cfg`` file.

        A missing file is not an error. A malformed file is reported and
        skipped.
        """
        config_file = self._ctx.config_file
        if not os.path.isfile(config_file):
            return

        try:
            config = ConfigParser(interpolation=None)
            config.optionxform = str  # type: ignore[assignment]
            config.read(config_file)
            for k, v in config.items(CONFIG_SECTION):
                if v and not self.get(k.upper()):
                    self[k.upper()] = self._strip_quotes(v)
        except Exception as e:
            self._ctx.logger.warn(
                f"Failed to parse config file {config_file} with error:\n{e}\n"
                f"Settings in the config file will not be loaded. The valid "
                f"config file structure is:\n{CONFIG_TEMPLATE}"
            )

    def _log_env_vars(self) -> None:
        """Log the registered settings at debug level."""
        if not self:
            return
        width = max(len(k) for k in self) + 4
        lines = [f"\t{k.ljust(width)}{v}" for k, v in sorted(self.items())]
        self._ctx.logger.debug("Registered settings:\n" + "\n".join(lines))
