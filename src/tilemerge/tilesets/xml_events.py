"""
Lazy element event stream over Qt's pull parser.

Only element boundaries matter for tileset files; character data,
comments and processing instructions are dropped.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Union

from PySide6.QtCore import QByteArray, QIODevice, QXmlStreamAttributes, QXmlStreamReader

from ..errors import ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartElement:
    """Opening tag with its attributes."""
    name: str
    attributes: QXmlStreamAttributes = field(compare=False)
    line: int = 0


@dataclass(frozen=True)
class EndElement:
    """Closing tag (also emitted for self-closing elements)."""
    name: str
    line: int = 0


XmlEvent = Union[StartElement, EndElement]


class XmlEventStream:
    """Iterator of `StartElement` / `EndElement` events.

    The stream is consumed strictly forward. `skip_element` drops everything
    up to the end tag matching the most recent start tag.
    """

    def __init__(self, reader: QXmlStreamReader):
        self.reader = reader

    @classmethod
    def from_device(cls, device: QIODevice) -> "XmlEventStream":
        """Create a stream reading from an open Qt device (e.g. QFile)."""
        return cls(QXmlStreamReader(device))

    @classmethod
    def from_bytes(cls, data: bytes) -> "XmlEventStream":
        """Create a stream over an in-memory document."""
        return cls(QXmlStreamReader(QByteArray(data)))

    def __iter__(self) -> Iterator[XmlEvent]:
        return self

    def __next__(self) -> XmlEvent:
        reader = self.reader
        while not reader.atEnd():
            token = reader.readNext()
            if token == QXmlStreamReader.TokenType.StartElement:
                return StartElement(
                    name=str(reader.name()),
                    attributes=reader.attributes(),
                    line=reader.lineNumber(),
                )
            if token == QXmlStreamReader.TokenType.EndElement:
                return EndElement(name=str(reader.name()), line=reader.lineNumber())
        raise StopIteration

    def skip_element(self) -> int:
        """Consume events up to the end of the current element.

        Must be called right after a `StartElement` was yielded. Nested
        elements are tracked with a depth counter.

        Returns:
            Number of nested start elements that were skipped
        """
        depth = 1
        skipped = 0
        for event in self:
            if isinstance(event, StartElement):
                depth += 1
                skipped += 1
            else:
                depth -= 1
                if depth == 0:
                    return skipped
        # Stream ended inside the element; caller checks raise_for_error()
        return skipped

    def has_error(self) -> bool:
        return self.reader.hasError()

    def raise_for_error(self) -> None:
        """Raise ParseError if the reader stopped on a syntax error."""
        if not self.reader.hasError():
            return
        message = (
            f"{self.reader.errorString()} "
            f"(line {self.reader.lineNumber()}, column {self.reader.columnNumber()})"
        )
        logger.error(f"XML parse error: {message}")
        raise ParseError(message)
