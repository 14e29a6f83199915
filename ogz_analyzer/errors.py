"""Error types raised while decoding OGZ data."""
from contextlib import contextmanager
from typing import Iterator, List, Optional

class OgzParsingError(Exception):
    """Raised when an OGZ buffer cannot be decoded.

    Attributes:
        offset: Byte offset of the failing read, if known
        context: Record trail from innermost to outermost
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.context: List[str] = []

    def push_context(self, label: str) -> None:
        self.context.append(label)

    def __str__(self) -> str:
        text = self.message
        if self.offset is not None:
            text += f" at offset 0x{self.offset:x}"
        if self.context:
            text += " (in " + " > ".join(reversed(self.context)) + ")"
        return text

class UnsupportedMagicError(OgzParsingError):
    """Magic tag is neither OCTA nor TMAP."""

class UnexpectedEofError(OgzParsingError):
    """Buffer exhausted before a required field."""

class UnknownVarTypeError(OgzParsingError):
    """Variable tag outside {0, 1, 2}."""

class UnknownOctsavTypeError(OgzParsingError):
    """Cube content kind outside 0..4."""

class InvalidTextError(OgzParsingError):
    """Length-prefixed text field is not valid UTF-8."""

class ChainLengthMismatchError(OgzParsingError):
    """VSlot delta chain overshoots the declared count."""

class InvalidWorldSizeError(OgzParsingError):
    """World size is not a power of two in the supported range."""

class OctreeDepthError(OgzParsingError):
    """Cube subdivision below unit size."""

@contextmanager
def error_context(label: str) -> Iterator[None]:
    """Tag any OgzParsingError raised inside the block with a record label."""
    try:
        yield
    except OgzParsingError as e:
        e.push_context(label)
        raise
