"""Basic unit tests for sprite_rotation settings and logging."""

import logging
from pathlib import Path

from PySide6.QtCore import QSettings


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, app_settings) -> None:
        """Test AppSettings stamps new profiles with the current version."""
        assert app_settings.stored_version == "1.0"
        assert app_settings.settings.value("app/version") == "1.0"

    def test_app_settings_validation(self, app_settings) -> None:
        """Test default settings validate cleanly."""
        validation = app_settings.validate()
        assert validation.is_valid
        assert validation.errors == []

    def test_unknown_version_is_invalid(self, app_settings) -> None:
        """Test a profile written by an unknown format fails validation."""
        app_settings.settings.setValue("app/version", "9.9")
        validation = app_settings.validate()
        assert not validation.is_valid
        assert any("9.9" in e for e in validation.errors)

    def test_existing_version_not_overwritten(self, settings_file: Path) -> None:
        from sprite_rotation.settings import AppSettings

        store = QSettings(str(settings_file), QSettings.Format.IniFormat)
        store.setValue("default/app/version", "0.5")
        store.sync()

        reopened = AppSettings(
            qsettings=QSettings(str(settings_file), QSettings.Format.IniFormat)
        )
        assert reopened.stored_version == "0.5"

    def test_settings_persist_in_profile(self, settings_file: Path) -> None:
        """Test values survive reopening the same store."""
        from sprite_rotation.settings import AppSettings

        first = AppSettings(
            profile="p1", qsettings=QSettings(str(settings_file), QSettings.Format.IniFormat)
        )
        first.engine.default_margin = 4
        first.engine.input_protection = True

        second = AppSettings(
            profile="p1", qsettings=QSettings(str(settings_file), QSettings.Format.IniFormat)
        )
        assert second.engine.default_margin == 4
        assert second.engine.input_protection is True

        other = AppSettings(
            profile="p2", qsettings=QSettings(str(settings_file), QSettings.Format.IniFormat)
        )
        assert other.engine.default_margin == 0


class TestEngineSettings:
    """Test engine settings clamping."""

    def test_defaults(self, app_settings) -> None:
        assert app_settings.engine.default_margin == 0
        assert app_settings.engine.input_protection is False
        assert app_settings.engine.tick_interval_ms == 16

    def test_negative_margin_clamped(self, app_settings) -> None:
        app_settings.engine.default_margin = -5
        assert app_settings.engine.default_margin == 0

    def test_tick_interval_clamped(self, app_settings) -> None:
        app_settings.engine.tick_interval_ms = 0
        assert app_settings.engine.tick_interval_ms == 1
        app_settings.engine.tick_interval_ms = 5000
        assert app_settings.engine.tick_interval_ms == 1000

    def test_negative_stored_margin_warns(self, app_settings) -> None:
        app_settings.settings.setValue("engine/default_margin", -3)
        validation = app_settings.validate()
        assert validation.is_valid
        assert any("margin" in w for w in validation.warnings)


class TestLoggingSettings:
    """Test logging settings."""

    def test_invalid_level_kept(self, app_settings) -> None:
        app_settings.logging.console_log_level = "debug"
        assert app_settings.logging.console_log_level == "DEBUG"
        app_settings.logging.console_log_level = "loud"
        assert app_settings.logging.console_log_level == "DEBUG"


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(self, app_settings) -> None:
        """Test logging setup works with settings."""
        from sprite_rotation.utils.logging_config import setup_logging

        setup_logging(settings=app_settings)

        logger = logging.getLogger("sprite_rotation")
        assert logger.level == logging.DEBUG

    def test_file_logging_writes_csv(self, app_settings, tmp_path: Path) -> None:
        """Test file handler writes CSV rows."""
        from sprite_rotation.utils.logging_config import setup_logging

        log_file = tmp_path / "logs" / "run.csv"
        app_settings.logging.file_logging = True
        app_settings.logging.console_logging = False
        app_settings.logging.log_file_path = str(log_file)

        setup_logging(settings=app_settings)
        logging.getLogger("sprite_rotation.test").info('quoted "value"')
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert '"quoted ""value"""' in content

        for handler in list(logging.getLogger().handlers):
            handler.close()
            logging.getLogger().removeHandler(handler)
