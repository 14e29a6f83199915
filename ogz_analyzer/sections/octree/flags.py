# ogz_analyzer/sections/octree/flags.py
from enum import IntEnum, IntFlag

class OctsavKind(IntEnum):
    """Cube content kind, low 3 bits of the octsav byte."""
    CHILDREN = 0     # Subdivided, nothing else stored for this node
    EMPTY = 1
    SOLID = 2
    NORMAL = 3       # 12 raw edge bytes follow
    LODCUBE = 4      # Leaf data plus children

class OctsavFlags(IntFlag):
    """Extension bits of the octsav byte."""
    SURFACES = 0x20
    MATERIAL = 0x40
    MERGED = 0x80

class SurfaceVertFlags(IntFlag):
    """Bits of a face's vertex mask."""
    ORDER = 0x01         # Corner order / packed xyz bounds
    PACKED_UV = 0x02     # 4-corner uv pair
    XYZ = 0x04
    NORMAL_SHARED = 0x08 # One normal for every vertex
    UV = 0x40
    NORMAL = 0x80

KIND_MASK = 0x07
NUM_FACES = 6
NUM_EDGES = 12

# Low nibble of the vertex count is the layer's vertex count
MAX_FACE_VERTS = 0x0F
# Second layer duplicates the first
LAYER_DUP = 0x80

EMPTY_EDGES = bytes([0x00] * NUM_EDGES)
SOLID_EDGES = bytes([0x80] * NUM_EDGES)
