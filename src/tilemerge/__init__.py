"""
TileMerge: compose tile grids described in XML into PNG images.

Each `tileset` element becomes one image; its `image` and `text` children
fill the grid cells in row-major order.
"""

# Banner version, printed as "TileMerge vMAJOR.MINOR"
VERSION = 1
SUB_VERSION = 0

__version__ = f"{VERSION}.{SUB_VERSION}"
__author__ = "TileMerge Contributors"

PROGRAM_NAME = "TileMerge"

from .errors import TileMergeError, FileOpenError, MissingSourceError, ParseError
from .tilesets import TilesetService, TilesetComposer
from .utils.logging_config import setup_logging

__all__ = [
    # Services
    'TilesetService',
    'TilesetComposer',

    # Errors
    'TileMergeError',
    'FileOpenError',
    'MissingSourceError',
    'ParseError',

    # Logging
    'setup_logging',
]
