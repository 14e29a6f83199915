"""Base section parser."""
from typing import Any, Dict, Optional
import logging

from ..errors import InvalidTextError
from ..utils.binary import OgzReader

logger = logging.getLogger(__name__)

def decode_text(raw: bytes, offset: int, what: str) -> str:
    """Decode a length-prefixed text payload as UTF-8."""
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidTextError(f"Invalid text in {what}: {e.reason}", offset) from e

class BaseSection:
    """Base class for section parsers.

    Sections share one reader; parse() consumes exactly the bytes of
    its section and leaves the cursor at the start of the next one.
    """

    def __init__(self, reader: OgzReader, context: Optional[Dict[str, Any]] = None):
        """Initialize section parser.

        Args:
            reader: Cursor positioned at the start of the section
            context: Values decoded by earlier sections (header, counts)
        """
        self.reader = reader
        self.context = context or {}

    def parse(self) -> Any:
        """Parse section data.

        Raises:
            OgzParsingError: If section data is invalid
        """
        raise NotImplementedError("Subclasses must implement parse()")

    def _read_text(self, length_format: str, what: str) -> str:
        """Read a length-prefixed UTF-8 string."""
        offset = self.reader.tell()
        length = self.reader.read_struct(length_format)[0]
        raw = self.reader.read_bytes(length)
        return decode_text(raw, offset, what)
