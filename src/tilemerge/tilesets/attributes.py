"""
Typed access to XML element attributes with fixed defaults.
"""

from typing import Optional

from PySide6.QtCore import QXmlStreamAttributes

from ..errors import TileMergeError
from .colors import RGBA, parse_color

# Largest value Qt's toUInt accepts
UINT_MAX = 0xFFFFFFFF


def parse_uint(value: str) -> int:
    """Parse an unsigned decimal integer the way the XML reader's codec does.

    An optional leading "+" is accepted. Anything else that is not a plain
    run of decimal digits (minus signs, fractions), or a value that does not
    fit in 32 bits, resolves to 0.
    """
    text = value.strip()
    if text.startswith("+"):
        text = text[1:]
    if not text.isdigit() or not text.isascii():
        return 0
    number = int(text)
    if number > UINT_MAX:
        return 0
    return number


class AttributeResolver:
    """Resolves attributes of a single element into typed values.

    Absent attributes always resolve to the caller's default, and present but
    malformed values resolve to best-effort results. Nothing here raises
    except `require_str`.
    """

    def __init__(self, attributes: QXmlStreamAttributes):
        self.attributes = attributes

    def has(self, name: str) -> bool:
        """Check whether the attribute is present."""
        return self.attributes.hasAttribute(name)

    def _raw(self, name: str) -> str:
        return str(self.attributes.value(name))

    def get_str(self, name: str, default: str) -> str:
        """Get attribute text, or default when absent."""
        if not self.has(name):
            return default
        return self._raw(name)

    def get_uint(self, name: str, default: int) -> int:
        """Get attribute as unsigned integer, or default when absent."""
        if not self.has(name):
            return default
        return parse_uint(self._raw(name))

    def get_color(self, name: str, default: RGBA) -> RGBA:
        """Get attribute as `#RRGGBBAA` color, or default when absent."""
        if not self.has(name):
            return default
        return parse_color(self._raw(name))

    def get_optional_color(self, name: str) -> Optional[RGBA]:
        """Get attribute as color, or None when absent."""
        if not self.has(name):
            return None
        return parse_color(self._raw(name))

    def require_str(self, name: str, error: type[TileMergeError]) -> str:
        """Get attribute text, raising `error` when absent."""
        if not self.has(name):
            raise error()
        return self._raw(name)
