# ogz_analyzer/sections/entities/__init__.py
"""Entity table parser."""
from .parser import EntitySection
from .entry import GameInfo, OgzEntity

__all__ = ['EntitySection', 'GameInfo', 'OgzEntity']
