"""
Data models for tileset composition.

Each model is built from one XML element through a `from_attributes`
constructor that applies the documented defaults.
"""

from dataclasses import dataclass
from typing import Optional

from ..errors import MissingSourceError
from .attributes import AttributeResolver
from .colors import RGBA, TRANSPARENT

# Default opaque yellow pen for text tiles
DEFAULT_TEXT_COLOR = RGBA(255, 255, 0, 255)


@dataclass(frozen=True)
class TileSetSpec:
    """Geometry and background of one output image.

    columns/rows come from the `width`/`height` attributes, which count
    tiles, while tile_width/tile_height are pixel sizes.
    """
    name: str = "unamed"
    columns: int = 1
    rows: int = 1
    tile_width: int = 32
    tile_height: int = 32
    background: RGBA = TRANSPARENT

    @classmethod
    def from_attributes(cls, attributes: AttributeResolver) -> "TileSetSpec":
        """Create TileSetSpec from `tileset` element attributes.

        Args:
            attributes: Resolver over the element's attributes

        Returns:
            TileSetSpec with defaults applied for absent attributes
        """
        return cls(
            name=attributes.get_str("name", "unamed"),
            columns=attributes.get_uint("width", 1),
            rows=attributes.get_uint("height", 1),
            tile_width=attributes.get_uint("tilewidth", 32),
            tile_height=attributes.get_uint("tileheight", 32),
            background=attributes.get_color("background", TRANSPARENT),
        )

    @property
    def tile_size(self) -> tuple[int, int]:
        return (self.tile_width, self.tile_height)

    @property
    def canvas_size(self) -> tuple[int, int]:
        """Pixel size of the whole grid."""
        return (self.columns * self.tile_width, self.rows * self.tile_height)

    @property
    def output_file_name(self) -> str:
        return f"{self.name}.png"


@dataclass(frozen=True)
class ImageTileSpec:
    """Tile sampled from an external image file."""
    source_path: str
    transparent_color: Optional[RGBA] = None

    @classmethod
    def from_attributes(cls, attributes: AttributeResolver) -> "ImageTileSpec":
        """Create ImageTileSpec from `image` element attributes.

        Raises:
            MissingSourceError: If the `source` attribute is absent
        """
        return cls(
            source_path=attributes.require_str("source", MissingSourceError),
            transparent_color=attributes.get_optional_color("transparentcolor"),
        )


@dataclass(frozen=True)
class TextTileSpec:
    """Tile rendered from a text string."""
    content: str = "T"
    font_size: int = 16
    color: RGBA = DEFAULT_TEXT_COLOR

    @classmethod
    def from_attributes(cls, attributes: AttributeResolver) -> "TextTileSpec":
        """Create TextTileSpec from `text` element attributes."""
        return cls(
            content=attributes.get_str("content", "T"),
            font_size=attributes.get_uint("size", 16),
            color=attributes.get_color("color", DEFAULT_TEXT_COLOR),
        )
