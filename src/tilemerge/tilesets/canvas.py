"""
Canvas allocation, grid placement and copy compositing.
"""

from PIL import Image

from .colors import RGBA, TRANSPARENT
from .models import TileSetSpec

# Fixed 32-bit canvas format
CANVAS_MODE = "RGBA"


def new_buffer(size: tuple[int, int], fill: RGBA = TRANSPARENT) -> Image.Image:
    """Allocate an RGBA raster filled with one color."""
    return Image.new(CANVAS_MODE, size, fill.to_tuple())


def build_canvas(spec: TileSetSpec) -> Image.Image:
    """Allocate the output raster of a tileset, filled with its background."""
    return new_buffer(spec.canvas_size, spec.background)


def tile_position(index: int, spec: TileSetSpec) -> tuple[int, int]:
    """Map a zero-based tile index to the pixel position of its cell.

    Tiles run left to right, then top to bottom. Indices past the declared
    grid map below the last row; nothing is range-checked here.

    Args:
        index: GridIndex of the tile
        spec: Tileset geometry

    Returns:
        (x, y) of the cell's top-left corner
    """
    if spec.columns == 0:
        # Zero-width grid: every index lands in column 0
        return (0, index * spec.tile_height)
    column, row = index % spec.columns, index // spec.columns
    return (column * spec.tile_width, row * spec.tile_height)


def is_empty(image: Image.Image) -> bool:
    """Check whether an image has no pixels at all."""
    return image.width == 0 or image.height == 0


def composite_tile(
    canvas: Image.Image, tile: Image.Image, position: tuple[int, int]
) -> None:
    """Copy a tile onto the canvas, replacing destination pixels.

    Source alpha is written as-is (no blending). Pixels falling outside the
    canvas are clipped.
    """
    if is_empty(tile) or is_empty(canvas):
        return
    canvas.paste(tile.convert(CANVAS_MODE), position)
