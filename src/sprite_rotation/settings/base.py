"""
Shared QSettings access for the settings subsystems.
"""

from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class SettingsGroup:
    """Typed reads and syncing writes over a QSettings store.

    INI-backed stores return every value as a string, so reads coerce
    the raw value and fall back to the default when it does not parse.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_bool(self, key: str, default: bool = False) -> bool:
        value = self.settings.value(key, default)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return default if value is None else bool(value)

    def _get_int(self, key: str, default: int = 0) -> int:
        value = self.settings.value(key, default)
        try:
            return default if value is None else int(cast(str | int, value))
        except (ValueError, TypeError):
            return default

    def _get_str(self, key: str, default: str = "") -> str:
        value = self.settings.value(key, default)
        return default if value is None else str(value)

    def _set(self, key: str, value: Any) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()
