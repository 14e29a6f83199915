"""
Binary data handling utilities for OGZ parsing.
"""
import io
import struct
from typing import Any, Tuple

from construct import Construct, StreamError

from ..errors import UnexpectedEofError

class OgzReader:
    """
    Little-endian cursor over a decompressed OGZ buffer

    All reads are exact-length: a short read raises UnexpectedEofError
    carrying the offset where the read started.
    """

    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.size = len(self.data)
        self.stream = io.BytesIO(self.data)

    def tell(self) -> int:
        return self.stream.tell()

    @property
    def remaining(self) -> int:
        return self.size - self.tell()

    def at_end(self) -> bool:
        return self.remaining == 0

    def read_bytes(self, count: int) -> bytes:
        """
        Read exactly count bytes

        Raises:
            UnexpectedEofError: If fewer than count bytes remain
        """
        offset = self.tell()
        data = self.stream.read(count)
        if len(data) < count:
            raise UnexpectedEofError(
                f"Needed {count} bytes, found {len(data)}", offset
            )
        return data

    def read_struct(self, fmt: str) -> Tuple[Any, ...]:
        """Unpack a little-endian struct format at the cursor"""
        fmt = '<' + fmt
        return struct.unpack(fmt, self.read_bytes(struct.calcsize(fmt)))

    def read_u8(self) -> int:
        return self.read_struct('B')[0]

    def read_u16(self) -> int:
        return self.read_struct('H')[0]

    def read_u32(self) -> int:
        return self.read_struct('I')[0]

    def read_i32(self) -> int:
        return self.read_struct('i')[0]

    def parse(self, subcon: Construct) -> Any:
        """
        Parse a construct definition at the cursor

        Args:
            subcon: Construct to parse from the underlying stream

        Returns:
            Parsed value

        Raises:
            UnexpectedEofError: If the construct ran out of data
        """
        offset = self.tell()
        try:
            return subcon.parse_stream(self.stream)
        except StreamError as e:
            raise UnexpectedEofError(f"Short read: {e}", offset) from e

    def skip(self, count: int, purpose: str) -> None:
        """
        Consume count bytes whose contents are not decoded

        Args:
            count: Number of bytes to skip
            purpose: What the skipped bytes hold, used in error messages
        """
        offset = self.tell()
        if count > self.remaining:
            raise UnexpectedEofError(
                f"Cannot skip {count} bytes of {purpose}, {self.remaining} left",
                offset
            )
        self.stream.seek(count, io.SEEK_CUR)

    def seek(self, offset: int) -> None:
        """Move the cursor to an absolute offset"""
        if not 0 <= offset <= self.size:
            raise UnexpectedEofError(f"Seek outside buffer to {offset}", self.tell())
        self.stream.seek(offset, io.SEEK_SET)
