"""
Settings validation system for sprite_rotation.
"""

import logging
from pathlib import Path
from typing import List, TYPE_CHECKING

from .logging import VALID_LEVELS
from .types import ConfigVersion, ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        version = self.settings.stored_version
        if version not in {v.value for v in ConfigVersion}:
            errors.append(f"Unsupported settings version: {version}")

        level = self.settings.logging.console_log_level
        if level.upper() not in VALID_LEVELS:
            errors.append(f"Unknown console log level: {level}")

        if self.settings.logging.file_logging:
            log_dir = Path(self.settings.logging.log_file_path).parent
            if log_dir.exists() and not log_dir.is_dir():
                errors.append(f"Log directory is not a directory: {log_dir}")

        stored_margin = self.settings.settings.value("engine/default_margin", 0)
        try:
            if int(str(stored_margin)) < 0:
                warnings.append(f"Negative default margin {stored_margin} is treated as 0")
        except ValueError:
            warnings.append(f"Default margin is not a number: {stored_margin}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
