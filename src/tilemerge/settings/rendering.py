"""
Rendering-related settings for TileMerge.
"""

import logging
from typing import TYPE_CHECKING

from PIL import Image

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

# Names accepted for rendering/resampling, mapped to Pillow filters
RESAMPLING_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "box": Image.Resampling.BOX,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


class RenderingSettings:
    """Manages tile rendering settings (fonts, image scaling)."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    @property
    def font_family(self) -> str:
        """Font family used for text tiles."""
        return self._get_str("rendering/font_family", "Times")

    @font_family.setter
    def font_family(self, value: str) -> None:
        self.settings.setValue("rendering/font_family", value)
        self.settings.sync()

    @property
    def resampling(self) -> str:
        """Name of the filter used to stretch images into tiles."""
        return self._get_str("rendering/resampling", "nearest").lower()

    @resampling.setter
    def resampling(self, value: str) -> None:
        """Set resampling filter name, ignoring unknown names."""
        if value.lower() in RESAMPLING_FILTERS:
            self.settings.setValue("rendering/resampling", value.lower())
            self.settings.sync()
        else:
            logger.warning(
                f"Invalid resampling filter: {value}, keeping current: {self.resampling}"
            )

    @property
    def resampling_filter(self) -> Image.Resampling:
        """Pillow filter for the configured name (nearest if unknown)."""
        return RESAMPLING_FILTERS.get(self.resampling, Image.Resampling.NEAREST)
