"""
Core settings management for TileMerge.
"""

import logging
from typing import Optional

from PIL import Image
from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .logging import LoggingSettings
from .rendering import RenderingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to application settings with automatic
    cross-platform storage and validation.
    """

    def __init__(self, profile: str = "default", settings: Optional[QSettings] = None):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings: Storage to use instead of the per-user native store
        """
        self.settings = settings if settings is not None else QSettings("tilemerge", "tilemerge")
        self.profile = profile

        # Use profile as a group: tilemerge/tilemerge/default/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._logging = LoggingSettings(self.settings)
        self._rendering = RenderingSettings(self.settings)

        self._ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    def _ensure_version(self) -> None:
        """Stamp the configuration version on first run."""
        if not str(self.settings.value("app/version", "")):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")

    # === SUBSYSTEM ACCESS ===

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def rendering(self) -> RenderingSettings:
        """Access rendering settings subsystem."""
        return self._rendering

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === RENDERING SETTINGS (DELEGATED) ===

    @property
    def font_family(self) -> str:
        return self._rendering.font_family

    @font_family.setter
    def font_family(self, value: str) -> None:
        self._rendering.font_family = value

    @property
    def resampling(self) -> str:
        return self._rendering.resampling

    @resampling.setter
    def resampling(self, value: str) -> None:
        self._rendering.resampling = value

    @property
    def resampling_filter(self) -> Image.Resampling:
        return self._rendering.resampling_filter

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @property
    def console_use_colors(self) -> bool:
        return self._logging.console_use_colors

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only)."""
        return self._logging.log_file_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
