"""
Tests for header decoding
"""

import struct
import pytest

from ogz_analyzer.errors import InvalidWorldSizeError, UnexpectedEofError, UnsupportedMagicError
from ogz_analyzer.sections.header import Engine, HeaderSection
from ogz_analyzer.utils.binary import OgzReader

from ogz_builder import header

def parse_header(data: bytes):
    reader = OgzReader(data)
    return HeaderSection(reader).parse(), reader

class TestHeaderSection:
    """Test header field presence rules"""

    def test_sauerbraten_version_29_has_no_vslot_count(self):
        """Before version 30 the vslot count is absent and reads as 0"""
        data = header(version=29, world_size=1024, num_ents=3, num_pvs=7,
                      num_lightmaps=2, blendmap=1, num_vars=4)
        parsed, reader = parse_header(data)

        assert len(data) == 4 + 8 * 4
        assert reader.tell() == len(data)
        assert parsed.engine is Engine.SAUERBRATEN
        assert parsed.version == 29
        assert parsed.world_size == 1024
        assert parsed.num_ents == 3
        assert parsed.num_pvs == 7
        assert parsed.num_lightmaps == 2
        assert parsed.blendmap == 1
        assert parsed.num_vars == 4
        assert parsed.num_vslots == 0

    def test_sauerbraten_version_30_has_vslot_count(self):
        """From version 30 the vslot count follows the var count"""
        data = header(version=30, world_size=512, num_vars=1, num_vslots=9)
        parsed, reader = parse_header(data)

        assert len(data) == 4 + 9 * 4
        assert reader.tell() == len(data)
        assert parsed.num_vars == 1
        assert parsed.num_vslots == 9

    def test_tesseract_has_no_lightmap_count(self):
        """TMAP headers skip the lightmap field"""
        data = header(magic=b'TMAP', version=1, world_size=1024, blendmap=5,
                      num_vars=2)
        parsed, reader = parse_header(data)

        assert reader.tell() == len(data)
        assert parsed.engine is Engine.TESSERACT
        assert parsed.num_lightmaps == 0
        assert parsed.blendmap == 5
        assert parsed.num_vars == 2
        assert parsed.num_vslots == 0

    def test_field_order(self):
        """Scalar fields are read in fixed order"""
        data = b'OCTA' + struct.pack('<9I', 33, 36, 4096, 10, 11, 12, 13, 14, 15)
        parsed, _ = parse_header(data)

        assert (parsed.version, parsed.header_size, parsed.world_size) == (33, 36, 4096)
        assert (parsed.num_ents, parsed.num_pvs, parsed.num_lightmaps) == (10, 11, 12)
        assert (parsed.blendmap, parsed.num_vars, parsed.num_vslots) == (13, 14, 15)

    def test_unsupported_magic(self):
        """Unknown magic fails before any other field is read"""
        reader = OgzReader(b'XXXX' + struct.pack('<I', 33))
        with pytest.raises(UnsupportedMagicError) as exc_info:
            HeaderSection(reader).parse()

        assert exc_info.value.offset == 0
        assert reader.tell() == 4

    def test_unsupported_magic_without_body(self):
        """Magic is checked even if nothing follows it"""
        with pytest.raises(UnsupportedMagicError):
            parse_header(b'XXXX')

    def test_truncated_header(self):
        """Short header raises UnexpectedEofError"""
        data = header(version=33)[:-2]
        with pytest.raises(UnexpectedEofError):
            parse_header(data)

    def test_truncated_magic(self):
        with pytest.raises(UnexpectedEofError):
            parse_header(b'OC')

    @pytest.mark.parametrize('world_size', [0, 1, 3, 1000, 1 << 17])
    def test_invalid_world_size(self, world_size):
        """World size must be a power of two within bounds"""
        with pytest.raises(InvalidWorldSizeError):
            parse_header(header(world_size=world_size))

    def test_to_dict(self):
        parsed, _ = parse_header(header(magic=b'TMAP', version=1, world_size=2))
        result = parsed.to_dict()

        assert result['magic'] == 'TMAP'
        assert result['engine'] == 'TESSERACT'
        assert result['world_size'] == 2
