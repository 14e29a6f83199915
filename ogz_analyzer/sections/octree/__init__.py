# ogz_analyzer/sections/octree/__init__.py
"""Octree (cube geometry) parser."""
from .parser import OctreeSection
from .cube import Cube, SurfaceInfo
from .flags import EMPTY_EDGES, SOLID_EDGES, OctsavFlags, OctsavKind

__all__ = [
    'OctreeSection',
    'Cube',
    'SurfaceInfo',
    'EMPTY_EDGES',
    'SOLID_EDGES',
    'OctsavFlags',
    'OctsavKind',
]
