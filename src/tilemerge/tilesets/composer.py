"""
Composition of one tileset element into one output image.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from PIL import Image

from ..errors import ParseError
from .attributes import AttributeResolver
from .canvas import build_canvas, composite_tile, is_empty, tile_position
from .colors import format_color
from .generators import ImageTileGenerator, TextTileGenerator
from .models import ImageTileSpec, TextTileSpec, TileSetSpec
from .xml_events import EndElement, StartElement, XmlEventStream

if TYPE_CHECKING:
    from ..settings import AppSettings

TILESET_ELEMENT = "tileset"
IMAGE_ELEMENT = "image"
TEXT_ELEMENT = "text"


@dataclass
class ComposedTileset:
    """Finished canvas together with the geometry it was built from."""
    spec: TileSetSpec
    canvas: Image.Image
    tile_count: int = 0

    def save(self) -> Optional[Path]:
        """Encode the canvas to `<name>.png` in the working directory.

        Any existing file of that name is overwritten.

        Returns:
            Written path, or None when the canvas has no pixels or the
            file cannot be written
        """
        logger = logging.getLogger(__name__)
        output_path = Path(self.spec.output_file_name)
        if is_empty(self.canvas):
            logger.warning(
                f"Tileset '{self.spec.name}' has an empty canvas "
                f"{self.canvas.size}, {output_path} not written"
            )
            return None
        try:
            self.canvas.save(output_path, format="PNG")
        except OSError as e:
            logger.error(f"Could not write tileset '{self.spec.name}' to {output_path}: {e}")
            return None
        return output_path


class TilesetComposer:
    """Drives tile generation and placement inside one `tileset` element.

    Each child element takes the next grid cell, whether or not it produced
    a tile.
    """

    def __init__(
        self,
        settings: Optional["AppSettings"] = None,
        image_generator: Optional[ImageTileGenerator] = None,
        text_generator: Optional[TextTileGenerator] = None,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings

        if image_generator is None:
            if settings is not None:
                image_generator = ImageTileGenerator(settings.resampling_filter)
            else:
                image_generator = ImageTileGenerator()
        if text_generator is None:
            if settings is not None:
                text_generator = TextTileGenerator(settings.font_family)
            else:
                text_generator = TextTileGenerator()

        self.image_generator = image_generator
        self.text_generator = text_generator

    def _generate_tile(
        self, element: StartElement, spec: TileSetSpec
    ) -> Optional[Image.Image]:
        """Dispatch a child element to its generator.

        Returns:
            Tile buffer, or None for unrecognized elements
        """
        attributes = AttributeResolver(element.attributes)
        if element.name == IMAGE_ELEMENT:
            return self.image_generator.generate(
                ImageTileSpec.from_attributes(attributes), spec.tile_size
            )
        if element.name == TEXT_ELEMENT:
            return self.text_generator.generate(
                TextTileSpec.from_attributes(attributes), spec.tile_size
            )

        self.logger.debug(
            f"Unknown element <{element.name}> at line {element.line}, cell left empty"
        )
        return None

    def compose(self, start: StartElement, events: XmlEventStream) -> ComposedTileset:
        """Build the canvas for the tileset whose start tag was just read.

        Consumes events up to and including the tileset's end tag.

        Args:
            start: The `tileset` start element
            events: Stream positioned right after `start`

        Returns:
            Composed tileset, not yet written

        Raises:
            MissingSourceError: If an image child has no source
            ParseError: If the document ends before the tileset does
        """
        spec = TileSetSpec.from_attributes(AttributeResolver(start.attributes))
        canvas = build_canvas(spec)
        self.logger.info(
            f"Tileset '{spec.name}': {spec.columns}x{spec.rows} tiles of "
            f"{spec.tile_width}x{spec.tile_height}px, canvas {spec.canvas_size}, "
            f"background {format_color(spec.background)}"
        )

        index = 0
        closed = False
        for event in events:
            if isinstance(event, EndElement):
                closed = True
                break

            tile = self._generate_tile(event, spec)
            skipped = events.skip_element()
            if skipped:
                self.logger.debug(
                    f"Ignored {skipped} nested elements inside <{event.name}>"
                )

            if tile is not None:
                position = tile_position(index, spec)
                composite_tile(canvas, tile, position)
                self.logger.debug(f"Tile {index} <{event.name}> placed at {position}")
            index += 1

        if not closed:
            events.raise_for_error()
            raise ParseError(f"Unexpected end of document inside <{start.name}>")

        return ComposedTileset(spec=spec, canvas=canvas, tile_count=index)

    def process(self, start: StartElement, events: XmlEventStream) -> Optional[Path]:
        """Compose a tileset and write it to `<name>.png`.

        Returns:
            Written path, or None when nothing was written
        """
        composed = self.compose(start, events)
        output_path = composed.save()
        if output_path is not None:
            self.logger.info(
                f"Tileset '{composed.spec.name}': {composed.tile_count} tiles "
                f"written to {output_path}"
            )
        return output_path
