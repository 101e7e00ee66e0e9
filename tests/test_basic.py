"""Basic unit tests for TileMerge modules."""

import logging

from PIL import Image


class TestPackage:
    """Test package metadata and exports."""

    def test_version(self) -> None:
        import tilemerge

        assert tilemerge.__version__ == "1.0"
        assert tilemerge.PROGRAM_NAME == "TileMerge"

    def test_error_ids(self) -> None:
        """Test error kinds keep their numeric ids."""
        from tilemerge import FileOpenError, MissingSourceError, ParseError

        assert FileOpenError().id == 0
        assert MissingSourceError().id == 1
        assert ParseError("x").id == 2
        assert str(MissingSourceError()) == "1:Failed to get image source!"


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_defaults(self, app_settings) -> None:
        """Test AppSettings exposes documented defaults."""
        assert app_settings.font_family == "Times"
        assert app_settings.resampling == "nearest"
        assert app_settings.resampling_filter == Image.Resampling.NEAREST
        assert app_settings.console_log_level == "WARNING"
        assert app_settings.file_logging is False
        assert app_settings.version == "1.0"

    def test_app_settings_validation(self, app_settings) -> None:
        """Test default settings validate cleanly."""
        validation = app_settings.validate()
        assert validation.is_valid
        assert validation.errors == []

    def test_invalid_resampling_rejected_by_setter(self, app_settings) -> None:
        app_settings.resampling = "blurry"
        assert app_settings.resampling == "nearest"

    def test_invalid_stored_resampling_fails_validation(self, app_settings) -> None:
        app_settings.settings.setValue("rendering/resampling", "blurry")
        validation = app_settings.validate()
        assert not validation.is_valid
        assert "blurry" in validation.errors[0]

    def test_empty_font_family_warns(self, app_settings) -> None:
        app_settings.font_family = ""
        validation = app_settings.validate()
        assert validation.is_valid
        assert any("Font family" in warning for warning in validation.warnings)

    def test_settings_persist(self, tmp_path) -> None:
        """Test values survive a new AppSettings on the same storage."""
        from PySide6.QtCore import QSettings
        from tilemerge.settings import AppSettings

        path = str(tmp_path / "persist.ini")
        first = AppSettings(settings=QSettings(path, QSettings.Format.IniFormat))
        first.font_family = "Courier"
        first.sync()

        second = AppSettings(settings=QSettings(path, QSettings.Format.IniFormat))
        assert second.font_family == "Courier"


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(self, app_settings) -> None:
        """Test logging setup works with settings."""
        from tilemerge.utils.logging_config import setup_logging

        setup_logging(settings=app_settings)

        logger = logging.getLogger("tilemerge")
        assert logger.level == logging.DEBUG

    def test_file_logging(self, app_settings, workdir) -> None:
        """Test CSV log file is created when file logging is enabled."""
        from tilemerge.utils.logging_config import setup_logging

        app_settings.file_logging = True
        setup_logging(settings=app_settings)
        logging.getLogger("tilemerge.test").warning('quote "me"')
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = (workdir / app_settings.log_file_path).read_text(encoding="utf-8")
        assert '"quote ""me"""' in content

        for handler in list(logging.getLogger().handlers):
            handler.close()
            logging.getLogger().removeHandler(handler)

    def test_colored_formatter(self) -> None:
        from tilemerge.utils.logging_config import ColoredFormatter

        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        assert formatter.format(record) == "\033[31mERROR\033[0m boom"
