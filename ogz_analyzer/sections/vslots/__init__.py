# ogz_analyzer/sections/vslots/__init__.py
"""VSlot (surface variant) chain parser."""
from .parser import VSlotSection
from .entry import ShaderParam, VSlot
from .flags import VSlotFlags

__all__ = ['VSlotSection', 'ShaderParam', 'VSlot', 'VSlotFlags']
