# ogz_analyzer/parser/constants.py
from enum import Enum, auto

class DecodePhase(Enum):
    """Sections of an OGZ file, in stream order."""
    HEADER = auto()       # Magic, version, counts
    VARIABLES = auto()    # Map vars, game mode
    ENTITIES = auto()     # MRU block, entity records
    VSLOTS = auto()       # Surface variant chain
    OCTREE = auto()       # Cube tree

GZIP_MAGIC = b'\x1f\x8b'
