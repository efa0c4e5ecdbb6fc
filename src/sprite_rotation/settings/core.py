"""
Core settings management for sprite_rotation.
"""

import logging
from typing import Optional

from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .engine import EngineSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "sprite_rotation"
APPLICATION = "sprite_rotation"
VERSION_KEY = "app/version"


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to application settings with automatic
    cross-platform storage and validation.
    """

    def __init__(self, profile: str = "default", qsettings: Optional[QSettings] = None):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")
            qsettings: Backing store to use instead of the platform default
                (e.g. an INI file for tests or portable installs)
        """
        self.settings = qsettings or QSettings(ORGANIZATION, APPLICATION)
        self.profile = profile

        # Use profile as a group to create hierarchy: sprite_rotation/default/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._engine = EngineSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        # New profiles are stamped with the format they are written in
        if not self.settings.value(VERSION_KEY):
            self.settings.setValue(VERSION_KEY, ConfigVersion.CURRENT.value)
            self.settings.sync()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def engine(self) -> EngineSettings:
        """Access engine settings subsystem."""
        return self._engine

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def stored_version(self) -> str:
        """Format version recorded in the profile."""
        return str(self.settings.value(VERSION_KEY, ConfigVersion.CURRENT.value))

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()
