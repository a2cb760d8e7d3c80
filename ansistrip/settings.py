"""Settings and configuration for the ansistrip CLI."""

# User directory and config file
USER_DIR = ".ansistrip"
CONFIG_FILE = "ansistrip.cfg"
CONFIG_SECTION = "config"

# Environment
ENV_PREFIX = "ANSISTRIP_"
CONFIG_PATH_VAR = f"{ENV_PREFIX}CONFIG"
SETTING_KEYS = [
    "STRINGS",
    "LOG_LEVEL",
]

# Value parsing
TRUE_VALUES = {"1", "true", "yes", "on", "y"}
FALSE_VALUES = {"0", "false", "no", "off", "n", ""}
LOG_LEVELS = ["ERROR", "WARN", "INFO", "DEBUG"]

# Text streams
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"
STDIO_PATH = "-"

# Templates
CONFIG_TEMPLATE = """
[config]
# also strip OSC, DCS, SOS, PM and APC sequences (true/false)
STRINGS=

# ERROR, WARN, INFO or DEBUG
LOG_LEVEL=
"""
