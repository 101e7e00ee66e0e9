"""
Settings validation system for TileMerge.
"""

import logging
from typing import List, TYPE_CHECKING

from PySide6.QtCore import QSettings

from .logging import VALID_LEVELS
from .rendering import RESAMPLING_FILTERS
from .types import ValidationResult

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

        resampling = self.settings.rendering.resampling
        if resampling not in RESAMPLING_FILTERS:
            errors.append(
                f"Unknown resampling filter: {resampling} "
                f"(expected one of {', '.join(RESAMPLING_FILTERS)})"
            )

        if not self.settings.font_family.strip():
            warnings.append("Font family is empty, Qt default font will be used")

        if self.settings.console_log_level.upper() not in VALID_LEVELS:
            warnings.append(
                f"Unknown console log level: {self.settings.console_log_level}"
            )

        if self.settings.settings.status() != QSettings.Status.NoError:
            warnings.append(
                f"Settings storage is not accessible: {self.settings.get_settings_file_path()}"
            )

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
