# ogz_analyzer/sections/vslots/flags.py
from enum import IntFlag

class VSlotFlags(IntFlag):
    """Bits of a vslot 'changed' mask, one per optional field."""
    SHPARAM = 1 << 0     # Shader parameter list
    SCALE = 1 << 1
    ROTATION = 1 << 2
    OFFSET = 1 << 3
    SCROLL = 1 << 4
    LAYER = 1 << 5
    ALPHA = 1 << 6       # Front and back alpha
    COLOR = 1 << 7       # RGB color scale
