# ogz_analyzer/sections/header/engine.py
from enum import Enum

class Engine(Enum):
    """Engine dialects, selected by the 4-byte magic tag."""
    SAUERBRATEN = b'OCTA'
    TESSERACT = b'TMAP'

    @classmethod
    def from_magic(cls, magic: bytes) -> 'Engine':
        """Raises ValueError for an unknown tag."""
        return cls(magic)

# First format version that stores the vslot count in the header
VSLOT_MIN_VERSION = 30

# Largest world the decoder accepts (16 octree levels)
MAX_WORLD_SIZE = 1 << 16
