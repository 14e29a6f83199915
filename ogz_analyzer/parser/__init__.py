# ogz_analyzer/parser/__init__.py
"""OGZ file parser module."""
from .file_parser import OgzFileParser, OgzWorld
from .constants import DecodePhase

__all__ = [
    'OgzFileParser',
    'OgzWorld',
    'DecodePhase'
]
