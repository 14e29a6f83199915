# ogz_analyzer/sections/header/parser.py
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Tuple
import logging

from ...errors import InvalidWorldSizeError, UnsupportedMagicError
from ..base import BaseSection
from .engine import Engine, MAX_WORLD_SIZE, VSLOT_MIN_VERSION

logger = logging.getLogger(__name__)

@dataclass
class OgzHeader:
    """Decoded OGZ file header."""
    magic: bytes
    engine: Engine
    version: int
    header_size: int     # Informational only
    world_size: int      # Power of two, root cubes are world_size / 2
    num_ents: int
    num_pvs: int
    num_lightmaps: int   # Sauerbraten only, else 0
    blendmap: int
    num_vars: int
    num_vslots: int      # Version 30+, else 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert header to dictionary format."""
        result = asdict(self)
        result['magic'] = self.magic.decode('ascii')
        result['engine'] = self.engine.name
        return result

Predicate = Callable[[Engine, Dict[str, int]], bool]

def _always(engine: Engine, fields: Dict[str, int]) -> bool:
    return True

# Header fields after the magic, in stream order. Every field is a u32;
# a field whose predicate is false is absent and reads as 0.
HEADER_FIELDS: Tuple[Tuple[str, Predicate], ...] = (
    ('version', _always),
    ('header_size', _always),
    ('world_size', _always),
    ('num_ents', _always),
    ('num_pvs', _always),
    ('num_lightmaps', lambda engine, fields: engine is Engine.SAUERBRATEN),
    ('blendmap', _always),
    ('num_vars', _always),
    ('num_vslots', lambda engine, fields: fields['version'] >= VSLOT_MIN_VERSION),
)

class HeaderSection(BaseSection):
    """OGZ header parser.

    Layout: 4-byte magic, then u32 fields whose presence depends on the
    engine dialect and format version.
    """

    def parse(self) -> OgzHeader:
        """Parse header at the cursor."""
        offset = self.reader.tell()
        magic = self.reader.read_bytes(4)
        try:
            engine = Engine.from_magic(magic)
        except ValueError:
            raise UnsupportedMagicError(f"Unsupported magic {magic!r}", offset) from None

        fields: Dict[str, int] = {}
        for name, present in HEADER_FIELDS:
            fields[name] = self.reader.read_u32() if present(engine, fields) else 0

        header = OgzHeader(magic=magic, engine=engine, **fields)
        self._validate_world_size(header, offset)

        logger.debug(
            f"{engine.name} map version {header.version}, world size {header.world_size}, "
            f"{header.num_vars} vars, {header.num_ents} ents, {header.num_vslots} vslots"
        )
        return header

    @staticmethod
    def _validate_world_size(header: OgzHeader, offset: int) -> None:
        size = header.world_size
        if size < 2 or size > MAX_WORLD_SIZE or size & (size - 1):
            raise InvalidWorldSizeError(
                f"World size {size} is not a power of two in [2, {MAX_WORLD_SIZE}]",
                offset
            )
