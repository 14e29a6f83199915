"""
Tests for the OGZ byte reader
"""

import struct

import pytest
from construct import Int16ul, Struct

from ogz_analyzer.errors import UnexpectedEofError
from ogz_analyzer.utils.binary import OgzReader

class TestOgzReader:
    """Test cursor movement and exact-length reads"""

    def test_little_endian_reads(self):
        reader = OgzReader(struct.pack('<BHIi', 1, 0x0203, 0x04050607, -2))

        assert reader.read_u8() == 1
        assert reader.read_u16() == 0x0203
        assert reader.read_u32() == 0x04050607
        assert reader.read_i32() == -2
        assert reader.at_end()

    def test_short_read(self):
        reader = OgzReader(b'\x01\x02\x03')
        reader.read_u8()
        with pytest.raises(UnexpectedEofError) as exc_info:
            reader.read_u32()
        assert exc_info.value.offset == 1

    def test_construct_short_read(self):
        reader = OgzReader(b'\x01\x00\x02')
        with pytest.raises(UnexpectedEofError) as exc_info:
            reader.parse(Struct("a" / Int16ul, "b" / Int16ul))
        assert exc_info.value.offset == 0

    def test_skip(self):
        reader = OgzReader(b'\x00' * 6)
        reader.skip(4, 'padding')
        assert reader.tell() == 4
        assert reader.remaining == 2

        with pytest.raises(UnexpectedEofError) as exc_info:
            reader.skip(3, 'texture MRU table')
        assert 'texture MRU table' in str(exc_info.value)
        assert reader.tell() == 4

    def test_seek(self):
        reader = OgzReader(b'\x0a\x0b\x0c\x0d')
        reader.seek(2)
        assert reader.read_u8() == 0x0c

        reader.seek(0)
        assert reader.read_u8() == 0x0a

        reader.seek(4)
        assert reader.at_end()

    @pytest.mark.parametrize('offset', [-1, 5])
    def test_seek_outside_buffer(self, offset):
        reader = OgzReader(b'\x00' * 4)
        reader.skip(1, 'padding')
        with pytest.raises(UnexpectedEofError):
            reader.seek(offset)
        assert reader.tell() == 1
