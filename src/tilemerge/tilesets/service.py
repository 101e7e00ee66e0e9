"""
File-level driver for tileset composition.

Opens an XML description, finds every `tileset` element and hands each one
to the composer. Any error aborts the remaining file.
"""

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING, Union

from PySide6.QtCore import QFile, QIODevice

from ..errors import FileOpenError
from .composer import TILESET_ELEMENT, TilesetComposer
from .xml_events import StartElement, XmlEventStream

if TYPE_CHECKING:
    from ..settings import AppSettings


class TilesetService:
    """Facade turning XML tileset descriptions into PNG files."""

    def __init__(
        self,
        settings: Optional["AppSettings"] = None,
        composer: Optional[TilesetComposer] = None,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings
        self.composer = composer or TilesetComposer(settings)

    def merge_events(self, events: XmlEventStream) -> list[Path]:
        """Compose every tileset found in an event stream.

        Only elements named `tileset` are composed. Other elements are
        descended into, so tilesets may sit under any wrapper root.

        Returns:
            Written output paths in document order

        Raises:
            MissingSourceError: If an image element has no source
            ParseError: If the document is not well-formed
        """
        written: list[Path] = []
        for event in events:
            if not isinstance(event, StartElement):
                continue
            if event.name != TILESET_ELEMENT:
                self.logger.debug(
                    f"Descending into <{event.name}> at line {event.line}"
                )
                continue

            output_path = self.composer.process(event, events)
            if output_path is not None:
                written.append(output_path)

        events.raise_for_error()
        return written

    def merge_file(self, file_name: Union[str, Path]) -> list[Path]:
        """Compose every tileset of an XML file into `<name>.png` files.

        Args:
            file_name: Path to the XML description

        Returns:
            Written output paths in document order

        Raises:
            FileOpenError: If the file cannot be opened
            MissingSourceError: If an image element has no source
            ParseError: If the document is not well-formed
        """
        xml_file = QFile(str(file_name))
        if not xml_file.open(QIODevice.OpenModeFlag.ReadOnly | QIODevice.OpenModeFlag.Text):
            self.logger.error(f"Failed to open {file_name}: {xml_file.errorString()}")
            raise FileOpenError()

        try:
            self.logger.info(f"Processing {file_name}")
            written = self.merge_events(XmlEventStream.from_device(xml_file))
        finally:
            xml_file.close()

        self.logger.info(f"{len(written)} tileset image(s) written from {file_name}")
        return written
