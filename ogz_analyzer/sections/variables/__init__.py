# ogz_analyzer/sections/variables/__init__.py
"""Map variable table parser."""
from .parser import VariableSection
from .entry import OgzVar, VarType

__all__ = ['VariableSection', 'OgzVar', 'VarType']
