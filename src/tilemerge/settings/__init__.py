"""
Settings package for TileMerge.

Type-safe configuration management on top of Qt's QSettings.

Usage:
    from tilemerge.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ValidationResult
from .logging import LoggingSettings
from .rendering import RenderingSettings, RESAMPLING_FILTERS

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ValidationResult",
    "LoggingSettings",
    "RenderingSettings",
    "RESAMPLING_FILTERS",
]
