"""
Logging-related settings for sprite_rotation.
"""

import logging

from .base import SettingsGroup

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE_PATH = "logs/sprite_rotation.csv"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(SettingsGroup):
    """Console and CSV file log output, read by setup_logging()."""

    @property
    def console_logging(self) -> bool:
        return self._get_bool("logging/console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("logging/console_enabled", bool(value))

    @property
    def console_log_level(self) -> str:
        """Level name for the console handler (default INFO)."""
        return self._get_str("logging/console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(f"Ignoring unknown log level {value!r}")
            return
        self._set("logging/console_level", level)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("logging/console_use_colors", bool(value))

    @property
    def file_logging(self) -> bool:
        return self._get_bool("logging/file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("logging/file_enabled", bool(value))

    @property
    def log_file_path(self) -> str:
        """CSV log location, relative paths resolve against the working directory."""
        return self._get_str("logging/file_path", DEFAULT_LOG_FILE_PATH)

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._set("logging/file_path", str(value))
