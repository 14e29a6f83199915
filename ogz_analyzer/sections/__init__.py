# ogz_analyzer/sections/__init__.py
"""OGZ section parsers package."""
from .base import BaseSection
from .header import HeaderSection, OgzHeader, Engine
from .variables import VariableSection, OgzVar, VarType
from .entities import EntitySection, GameInfo, OgzEntity
from .vslots import VSlotSection, VSlot, VSlotFlags
from .octree import OctreeSection, Cube, OctsavKind

__all__ = [
    'BaseSection',
    'HeaderSection',
    'OgzHeader',
    'Engine',
    'VariableSection',
    'OgzVar',
    'VarType',
    'EntitySection',
    'GameInfo',
    'OgzEntity',
    'VSlotSection',
    'VSlot',
    'VSlotFlags',
    'OctreeSection',
    'Cube',
    'OctsavKind',
]
