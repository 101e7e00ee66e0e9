"""
Color codec for `#RRGGBBAA` attribute values.
"""

import string
from dataclasses import dataclass


@dataclass(frozen=True)
class RGBA:
    """Non-premultiplied 8-bit color with alpha."""
    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 0

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Return the color as a Pillow-compatible RGBA tuple."""
        return (self.red, self.green, self.blue, self.alpha)


TRANSPARENT = RGBA(0, 0, 0, 0)

# Length of "#RRGGBBAA"
COLOR_TEXT_LENGTH = 9


def _parse_hex_pair(pair: str) -> int:
    # Signs and blanks are rejected like Qt's toUInt, which yields 0
    if len(pair) != 2 or not all(c in string.hexdigits for c in pair):
        return 0
    return int(pair, 16)


def parse_color(value: str) -> RGBA:
    """Parse a `#RRGGBBAA` string into an RGBA color.

    Values shorter than nine characters give transparent black. The leading
    character is not checked, and a malformed hex pair yields 0 for that
    channel instead of an error.

    Args:
        value: Raw attribute text

    Returns:
        Parsed color
    """
    if len(value) < COLOR_TEXT_LENGTH:
        return TRANSPARENT

    return RGBA(
        red=_parse_hex_pair(value[1:3]),
        green=_parse_hex_pair(value[3:5]),
        blue=_parse_hex_pair(value[5:7]),
        alpha=_parse_hex_pair(value[7:9]),
    )


def format_color(color: RGBA) -> str:
    """Render a color back to `#RRGGBBAA` form."""
    return "#{:02X}{:02X}{:02X}{:02X}".format(*color.to_tuple())
