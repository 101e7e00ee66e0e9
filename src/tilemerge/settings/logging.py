"""
Logging-related settings for TileMerge.

Keys live under the `logging/` group of the active profile. Level and color
choices are edited in the settings file; only the on/off switches have
setters.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

# Relative to the working directory of the run
LOG_FILE_PATH = "logs/tilemerge.csv"

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONSOLE_ENABLED_KEY = "logging/console_enabled"
CONSOLE_LEVEL_KEY = "logging/console_level"
CONSOLE_COLORS_KEY = "logging/console_use_colors"
FILE_ENABLED_KEY = "logging/file_enabled"


class LoggingSettings:
    """Console and CSV file logging switches."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _flag(self, key: str, default: bool) -> bool:
        # INI storage hands booleans back as strings
        value = self.settings.value(key, default)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return default if value is None else bool(value)

    def _set_flag(self, key: str, value: bool) -> None:
        self.settings.setValue(key, bool(value))
        self.settings.sync()

    @property
    def console_logging(self) -> bool:
        return self._flag(CONSOLE_ENABLED_KEY, True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set_flag(CONSOLE_ENABLED_KEY, value)

    @property
    def console_log_level(self) -> str:
        """Level name for the stderr handler, WARNING unless configured."""
        value = self.settings.value(CONSOLE_LEVEL_KEY, "WARNING")
        return "WARNING" if value is None else str(value)

    @property
    def console_use_colors(self) -> bool:
        return self._flag(CONSOLE_COLORS_KEY, True)

    @property
    def file_logging(self) -> bool:
        return self._flag(FILE_ENABLED_KEY, False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set_flag(FILE_ENABLED_KEY, value)

    @property
    def log_file_path(self) -> str:
        return LOG_FILE_PATH
