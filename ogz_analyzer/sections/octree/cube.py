# ogz_analyzer/sections/octree/cube.py
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from construct import Int8ul, Int16ul, Struct

from .flags import EMPTY_EDGES, NUM_FACES, OctsavKind

SurfaceHeader = Struct(
    "lmid" / Int16ul,
    "verts" / Int8ul,
    "numverts" / Int8ul,
)

@dataclass
class SurfaceInfo:
    """Per-face surface header. The vertex payload itself is not kept."""
    face: int
    lmid: int            # Lightmap id
    verts: int           # Vertex mask
    numverts: int        # Raw count byte, low nibble plus layer bits
    payload_size: int = 0

    def to_dict(self) -> dict:
        return {
            'face': self.face,
            'lmid': self.lmid,
            'verts': self.verts,
            'numverts': self.numverts,
            'payload_size': self.payload_size
        }

@dataclass
class Cube:
    """Octree node.

    A CHILDREN cube only has `children`; every other kind carries edges
    and textures, and a LODCUBE carries both.
    """
    origin: Tuple[int, int, int]
    size: int
    kind: OctsavKind
    octsav: int
    children: Optional[List['Cube']] = None
    edges: bytes = EMPTY_EDGES
    texture: Tuple[int, ...] = (0,) * NUM_FACES
    material: int = 0
    merged: int = 0
    surfaces: Optional[List[SurfaceInfo]] = None

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    def walk(self) -> Iterator['Cube']:
        """Yield this cube and all descendants, depth first."""
        yield self
        for child in self.children or ():
            yield from child.walk()

    def to_dict(self) -> dict:
        """Convert cube (and subtree) to dictionary format."""
        result = {
            'origin': list(self.origin),
            'size': self.size,
            'kind': self.kind.name,
        }
        if self.kind is not OctsavKind.CHILDREN:
            result.update({
                'octsav': self.octsav,
                'edges': self.edges,
                'texture': list(self.texture),
                'material': self.material,
                'merged': self.merged,
            })
            if self.surfaces is not None:
                result['surfaces'] = [s.to_dict() for s in self.surfaces]
        if self.children is not None:
            result['children'] = [c.to_dict() for c in self.children]
        return result
