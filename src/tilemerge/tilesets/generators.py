"""
Tile generators: image sampling and text rendering.

Both generators return a Pillow RGBA buffer of exactly one tile. Skipping
the element's nested content is left to the caller.
"""

import logging

from PIL import Image
from PySide6.QtCore import QRect, Qt
from PySide6.QtGui import QColor, QFont, QImage, QPainter

from ..utils.qt_app import ensure_gui_application
from .canvas import CANVAS_MODE, is_empty, new_buffer
from .colors import RGBA, TRANSPARENT, format_color
from .models import ImageTileSpec, TextTileSpec


def replace_color(image: Image.Image, color: RGBA, replacement: RGBA = TRANSPARENT) -> int:
    """Replace every pixel exactly equal to `color`, in place.

    All four channels must match; there is no tolerance.

    Returns:
        Number of replaced pixels
    """
    key = color.to_tuple()
    new_value = replacement.to_tuple()
    pixels = image.load()
    replaced = 0
    for y in range(image.height):
        for x in range(image.width):
            if pixels[x, y] == key:
                pixels[x, y] = new_value
                replaced += 1
    return replaced


class ImageTileGenerator:
    """Builds tiles by stretching a source image to the tile size."""

    def __init__(self, resample: Image.Resampling = Image.Resampling.NEAREST):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.resample = resample

    def _load_source(self, source_path: str) -> Image.Image | None:
        """Load the source image as RGBA, or None if it cannot be decoded."""
        try:
            with Image.open(source_path) as source:
                return source.convert(CANVAS_MODE)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            self.logger.warning(f"Could not load tile image {source_path}: {e}")
            return None

    def generate(self, spec: ImageTileSpec, tile_size: tuple[int, int]) -> Image.Image:
        """Produce one tile from an image file.

        The source is scaled non-uniformly to fill the tile. An unreadable
        source leaves the tile fully transparent.

        Args:
            spec: Image tile description
            tile_size: (width, height) of the tile in pixels

        Returns:
            RGBA tile buffer
        """
        tile = new_buffer(tile_size)
        if is_empty(tile):
            return tile

        source = self._load_source(spec.source_path)
        if source is None or is_empty(source):
            return tile

        if source.size != tile_size:
            self.logger.debug(
                f"Scaling {spec.source_path} from {source.size} to {tile_size}"
            )
            tile = source.resize(tile_size, self.resample)
        else:
            tile = source

        if spec.transparent_color is not None:
            replaced = replace_color(tile, spec.transparent_color)
            self.logger.debug(
                f"{replaced} pixels of {format_color(spec.transparent_color)} "
                f"made transparent in {spec.source_path}"
            )

        return tile


class TextTileGenerator:
    """Builds tiles by drawing a string centred on a transparent buffer."""

    def __init__(self, font_family: str = "Times"):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.font_family = font_family

    def _make_font(self, font_size: int) -> QFont:
        # -1 keeps Qt's default point size; 0 is not a valid size
        point_size = font_size if font_size > 0 else -1
        return QFont(self.font_family, point_size, QFont.Weight.Bold)

    @staticmethod
    def _to_pil(qimage: QImage) -> Image.Image:
        """Copy a Format_RGBA8888 QImage into a Pillow image."""
        data = bytes(qimage.constBits())
        return Image.frombuffer(
            CANVAS_MODE,
            (qimage.width(), qimage.height()),
            data,
            "raw",
            CANVAS_MODE,
            qimage.bytesPerLine(),
            1,
        ).copy()

    def generate(self, spec: TextTileSpec, tile_size: tuple[int, int]) -> Image.Image:
        """Produce one tile with rendered text.

        Text is bold, centred and not wrapped; anything outside the tile is
        clipped by the painter.

        Args:
            spec: Text tile description
            tile_size: (width, height) of the tile in pixels

        Returns:
            RGBA tile buffer
        """
        width, height = tile_size
        if width == 0 or height == 0:
            return new_buffer(tile_size)

        ensure_gui_application()

        qimage = QImage(width, height, QImage.Format.Format_RGBA8888)
        qimage.fill(QColor(0, 0, 0, 0))

        painter = QPainter(qimage)
        try:
            painter.setFont(self._make_font(spec.font_size))
            painter.setPen(QColor(*spec.color.to_tuple()))
            painter.drawText(
                QRect(0, 0, width, height), Qt.AlignmentFlag.AlignCenter, spec.content
            )
        finally:
            painter.end()

        self.logger.debug(
            f"Rendered text '{spec.content}' at {spec.font_size}pt "
            f"in {format_color(spec.color)}"
        )
        return self._to_pil(qimage)
