"""
Transform engine settings for sprite_rotation.
"""

import logging

from .base import SettingsGroup

logger = logging.getLogger(__name__)

MIN_TICK_INTERVAL_MS = 1
MAX_TICK_INTERVAL_MS = 1000


class EngineSettings(SettingsGroup):
    """Manages rotation engine settings."""

    @property
    def default_margin(self) -> int:
        """Get default pixel margin for standalone image rotation (>= 0)."""
        return max(0, self._get_int("engine/default_margin", 0))

    @default_margin.setter
    def default_margin(self, value: int) -> None:
        """Set default pixel margin (negative values are stored as 0)."""
        self._set("engine/default_margin", max(0, int(value)))

    @property
    def input_protection(self) -> bool:
        """Check if flip input protection is enabled at startup."""
        return self._get_bool("engine/input_protection", False)

    @input_protection.setter
    def input_protection(self, value: bool) -> None:
        self._set("engine/input_protection", bool(value))

    @property
    def tick_interval_ms(self) -> int:
        """Get simulation tick interval in milliseconds (1-1000 ms)."""
        value = self._get_int("engine/tick_interval_ms", 16)
        return max(MIN_TICK_INTERVAL_MS, min(MAX_TICK_INTERVAL_MS, value))

    @tick_interval_ms.setter
    def tick_interval_ms(self, value: int) -> None:
        """Set simulation tick interval in milliseconds (1-1000 ms)."""
        validated = max(MIN_TICK_INTERVAL_MS, min(MAX_TICK_INTERVAL_MS, int(value)))
        if validated != value:
            logger.warning(f"Tick interval {value}ms out of range, using {validated}ms")
        self._set("engine/tick_interval_ms", validated)
