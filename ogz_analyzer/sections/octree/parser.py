"""Octree (cube tree) parser."""
from typing import List
import logging

from ...errors import OctreeDepthError, UnknownOctsavTypeError, error_context
from ..base import BaseSection
from .cube import Cube
from .flags import (
    EMPTY_EDGES,
    KIND_MASK,
    NUM_EDGES,
    NUM_FACES,
    SOLID_EDGES,
    OctsavFlags,
    OctsavKind,
)
from .surface import read_surfaces

logger = logging.getLogger(__name__)

class OctreeSection(BaseSection):
    """Octree parser.

    The world is 8 root cubes of half the world size. Each cube starts
    with an octsav byte whose low 3 bits pick the content kind:
    - CHILDREN: 8 subcubes follow immediately, nothing else for this node
    - EMPTY / SOLID: canonical edges, nothing read for them
    - NORMAL: 12 raw edge bytes
    - LODCUBE: default edges, then 8 subcubes after the shared tail
    The shared tail is 6 u16 textures plus the fields enabled by the
    extension bits (material, merge byte, surface block).
    """

    def parse(self) -> List[Cube]:
        """Parse the root cubes."""
        root_size = self.context['header'].world_size >> 1
        start = self.reader.tell()
        roots = self.decode_children(0, 0, 0, root_size)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Octree: {sum(1 for root in roots for _ in root.walk())} cubes, "
                f"{self.reader.tell() - start} bytes"
            )
        return roots

    def decode_children(self, x: int, y: int, z: int, size: int) -> List[Cube]:
        """Decode 8 sibling cubes at the corners {0, size}^3 from (x, y, z)."""
        if size <= 0:
            raise OctreeDepthError(
                f"Cube at ({x}, {y}, {z}) subdivided below unit size",
                self.reader.tell()
            )
        children = []
        for i in range(8):
            cx = x + (i & 1) * size
            cy = y + ((i >> 1) & 1) * size
            cz = z + ((i >> 2) & 1) * size
            with error_context(f"cube ({cx}, {cy}, {cz}) size {size}"):
                children.append(self.decode_cube(cx, cy, cz, size))
        return children

    def decode_cube(self, x: int, y: int, z: int, size: int) -> Cube:
        """Decode one cube and its subtree."""
        offset = self.reader.tell()
        octsav = self.reader.read_u8()
        try:
            kind = OctsavKind(octsav & KIND_MASK)
        except ValueError:
            raise UnknownOctsavTypeError(
                f"Unknown octsav kind {octsav & KIND_MASK} (octsav 0x{octsav:02x})",
                offset
            ) from None

        cube = Cube(origin=(x, y, z), size=size, kind=kind, octsav=octsav)

        if kind is OctsavKind.CHILDREN:
            cube.children = self.decode_children(x, y, z, size >> 1)
            return cube

        if kind is OctsavKind.EMPTY:
            cube.edges = EMPTY_EDGES
        elif kind is OctsavKind.SOLID:
            cube.edges = SOLID_EDGES
        elif kind is OctsavKind.NORMAL:
            cube.edges = self.reader.read_bytes(NUM_EDGES)

        self._read_tail(cube, octsav)

        if kind is OctsavKind.LODCUBE:
            cube.children = self.decode_children(x, y, z, size >> 1)
        return cube

    def _read_tail(self, cube: Cube, octsav: int) -> None:
        """Read textures and the fields enabled by the extension bits."""
        cube.texture = self.reader.read_struct(f'{NUM_FACES}H')
        if octsav & OctsavFlags.MATERIAL:
            cube.material = self.reader.read_u16()
        if octsav & OctsavFlags.MERGED:
            cube.merged = self.reader.read_u8()
        if octsav & OctsavFlags.SURFACES:
            cube.surfaces = read_surfaces(self.reader)
