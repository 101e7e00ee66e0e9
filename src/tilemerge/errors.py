"""
Error taxonomy for TileMerge.

Every fatal condition is raised as a `TileMergeError` and unwinds to the
entry point, which maps the numeric id to an exit path.
"""


class TileMergeError(Exception):
    """Base error carrying a numeric kind and a message.

    Kind 0 is the usage tier: the CLI answers it with the help banner.
    Any other kind is printed as ``id:text``.
    """

    id: int = 0
    default_text: str = ""

    def __init__(self, text: str = ""):
        self.text = text or self.default_text
        super().__init__(self.text)

    def __str__(self) -> str:
        return f"{self.id}:{self.text}"

    @property
    def is_usage_error(self) -> bool:
        return self.id == 0


class FileOpenError(TileMergeError):
    """Raised when the input XML file cannot be opened."""

    id = 0
    default_text = "Failed to open file!"


class MissingSourceError(TileMergeError):
    """Raised when an image element has no source attribute."""

    id = 1
    default_text = "Failed to get image source!"


class ParseError(TileMergeError):
    """Raised when the XML reader reports a syntax error."""

    id = 2
    default_text = "Failed to parse XML file!"
