"""
Tilesets package for TileMerge.

Turns `tileset` XML elements into composed PNG images: attribute parsing,
tile generation, grid placement and the file-level driver.
"""

from .service import TilesetService
from .composer import ComposedTileset, TilesetComposer
from .generators import ImageTileGenerator, TextTileGenerator
from .models import TileSetSpec, ImageTileSpec, TextTileSpec
from .colors import RGBA, TRANSPARENT, parse_color
from .xml_events import XmlEventStream, StartElement, EndElement

__all__ = [
    # Main service
    'TilesetService',
    'TilesetComposer',
    'ComposedTileset',

    # Generators
    'ImageTileGenerator',
    'TextTileGenerator',

    # Data models
    'TileSetSpec',
    'ImageTileSpec',
    'TextTileSpec',
    'RGBA',
    'TRANSPARENT',
    'parse_color',

    # XML traversal
    'XmlEventStream',
    'StartElement',
    'EndElement',
]
