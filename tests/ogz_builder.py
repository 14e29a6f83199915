"""
Helpers that build synthetic OGZ buffers for tests
"""

import struct
from typing import Iterable, Optional, Sequence

def header(magic: bytes = b'OCTA', version: int = 33, header_size: int = 40,
           world_size: int = 2, num_ents: int = 0, num_pvs: int = 0,
           num_lightmaps: int = 0, blendmap: int = 0, num_vars: int = 0,
           num_vslots: int = 0) -> bytes:
    """Create a header, omitting fields the dialect/version does not store"""
    data = magic + struct.pack('<5I', version, header_size, world_size, num_ents, num_pvs)
    if magic == b'OCTA':
        data += struct.pack('<I', num_lightmaps)
    data += struct.pack('<2I', blendmap, num_vars)
    if version >= 30:
        data += struct.pack('<I', num_vslots)
    return data

def var(var_type: int, name: bytes, payload: bytes) -> bytes:
    return struct.pack('<BH', var_type, len(name)) + name + payload

def ivar(name: bytes, value: int) -> bytes:
    return var(0, name, struct.pack('<I', value))

def fvar(name: bytes, value: float) -> bytes:
    return var(1, name, struct.pack('<f', value))

def svar(name: bytes, value: bytes) -> bytes:
    return var(2, name, struct.pack('<H', len(value)) + value)

def game_mode(name: bytes = b'') -> bytes:
    """Length-prefixed game mode plus its reserved byte"""
    return struct.pack('<B', len(name)) + name + b'\x00'

def mru_block(flags: int = 0, extra_size: int = 0, mru: Sequence[int] = ()) -> bytes:
    return struct.pack('<3H', flags, extra_size, len(mru)) + struct.pack(f'<{len(mru)}H', *mru)

def entity(x: float = 0.0, y: float = 0.0, z: float = 0.0,
           attrs: Sequence[int] = (0, 0, 0, 0, 0), ent_type: int = 0,
           reserved: int = 0) -> bytes:
    return struct.pack('<3f5h2B', x, y, z, *attrs, ent_type, reserved)

def vslot(changed: int, prev: int = -1, payload: bytes = b'') -> bytes:
    return struct.pack('<2i', changed, prev) + payload

def vslot_run(count: int) -> bytes:
    """Run-length record appending count default vslots"""
    return struct.pack('<i', -count)

def shader_params(*params) -> bytes:
    """Shader param list: u16 count, then (name, 4 floats) per param"""
    data = struct.pack('<H', len(params))
    for name, values in params:
        data += struct.pack('<H', len(name)) + name + struct.pack('<4f', *values)
    return data

def cube(octsav: int, edges: Optional[bytes] = None,
         textures: Sequence[int] = (1, 2, 3, 4, 5, 6),
         material: Optional[int] = None, merged: Optional[int] = None,
         surfaces: bytes = b'') -> bytes:
    """Create a non-children cube; extension fields must match octsav bits"""
    data = struct.pack('<B', octsav)
    if edges is not None:
        data += edges
    data += struct.pack('<6H', *textures)
    if material is not None:
        data += struct.pack('<H', material)
    if merged is not None:
        data += struct.pack('<B', merged)
    return data + surfaces

def children(cubes: Iterable[bytes]) -> bytes:
    return b'\x00' + b''.join(cubes)

def surface_block(surfmask: int, totalverts: int, faces: Iterable[bytes]) -> bytes:
    return struct.pack('<2B', surfmask, totalverts) + b''.join(faces)

def surface_face(lmid: int, verts: int, numverts: int, words: int = 0) -> bytes:
    """Face header followed by a payload of the given number of u16 words"""
    return struct.pack('<H2B', lmid, verts, numverts) + b'\xab\xcd' * words

def ogz(octree: bytes, variables: bytes = b'', mode: bytes = b'',
        mru: Sequence[int] = (), entities: bytes = b'', vslots: bytes = b'',
        **header_fields) -> bytes:
    """Assemble a file; header counts must match the sections passed in"""
    return (header(**header_fields) + variables + game_mode(mode) + mru_block(mru=mru)
            + entities + vslots + octree)

def solid_world() -> bytes:
    """8 solid root cubes for a world of size 2"""
    return b''.join(cube(2) for _ in range(8))
