# ogz_analyzer/sections/header/__init__.py
"""Header section parser."""
from .parser import HeaderSection, OgzHeader
from .engine import Engine, MAX_WORLD_SIZE, VSLOT_MIN_VERSION

__all__ = ['HeaderSection', 'OgzHeader', 'Engine', 'MAX_WORLD_SIZE', 'VSLOT_MIN_VERSION']
