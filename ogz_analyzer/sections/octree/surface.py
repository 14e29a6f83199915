"""Cube surface block reader.

The surface block follows a cube's fixed fields when octsav bit 0x20 is
set. Vertex positions, texture coordinates and normals are consumed and
dropped; only the per-face headers are kept. Every value in the payload
is a u16, so sizes are counted in words.
"""
from typing import List

from ...errors import error_context
from ...utils.binary import OgzReader
from .cube import SurfaceHeader, SurfaceInfo
from .flags import LAYER_DUP, MAX_FACE_VERTS, NUM_FACES, SurfaceVertFlags

WORD = 2

def surface_payload_words(verts: int, numverts: int) -> int:
    """Count the u16 words stored after a face header.

    Args:
        verts: Vertex mask byte
        numverts: Raw vertex count byte

    Returns:
        Number of u16 values in the face payload
    """
    layerverts = numverts & MAX_FACE_VERTS
    hasxyz = bool(verts & SurfaceVertFlags.XYZ)
    hasuv = bool(verts & SurfaceVertFlags.UV)
    hasnorm = bool(verts & SurfaceVertFlags.NORMAL)
    words = 0

    if layerverts == 4:
        # Quad fast paths: two packed corners instead of four vertices
        if hasxyz and verts & SurfaceVertFlags.ORDER:
            words += 4
            hasxyz = False
        if hasuv and verts & SurfaceVertFlags.PACKED_UV:
            words += 4
            hasuv = False

    if hasnorm and verts & SurfaceVertFlags.NORMAL_SHARED:
        words += 1
        hasnorm = False

    if hasxyz or hasuv or hasnorm:
        per_vertex = (2 if hasxyz else 0) + (2 if hasuv else 0) + (1 if hasnorm else 0)
        words += per_vertex * layerverts

    if numverts & LAYER_DUP and hasuv:
        words += 2 * layerverts

    return words

def read_surfaces(reader: OgzReader) -> List[SurfaceInfo]:
    """Read a cube's surface block.

    Layout: u8 surface mask, u8 total vertex count, then one header plus
    payload for each face whose bit is set in the mask.
    """
    surfmask = reader.read_u8()
    reader.skip(1, 'total vertex count')
    surfaces = []

    for face in range(NUM_FACES):
        if not surfmask & (1 << face):
            continue
        with error_context(f"surface face {face}"):
            header = reader.parse(SurfaceHeader)
            surface = SurfaceInfo(
                face=face,
                lmid=header.lmid,
                verts=header.verts,
                numverts=header.numverts
            )
            if header.numverts:
                surface.payload_size = WORD * surface_payload_words(header.verts, header.numverts)
                reader.skip(surface.payload_size, 'surface vertex payload')
        surfaces.append(surface)

    return surfaces
