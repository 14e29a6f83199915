# ogz_analyzer/sections/vslots/entry.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .flags import VSlotFlags

@dataclass
class ShaderParam:
    """Named shader parameter override."""
    name: bytes
    values: Tuple[float, float, float, float]

@dataclass
class VSlot:
    """Surface variant record.

    Only fields whose bit is set in `changed` were read from the stream;
    the rest keep their zero defaults.
    """
    changed: int = 0
    prev: Optional[int] = None       # Back-reference, opaque; None for run-length defaults
    params: List[ShaderParam] = field(default_factory=list)
    scale: float = 0.0
    rotation: int = 0
    offset: Tuple[int, int] = (0, 0)
    scroll: Tuple[float, float] = (0.0, 0.0)
    layer: int = 0
    alpha_front: float = 0.0
    alpha_back: float = 0.0
    color_scale: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    @property
    def flags(self) -> VSlotFlags:
        return VSlotFlags(self.changed & 0xFF)

    def to_dict(self) -> dict:
        """Convert vslot to dictionary format, listing only changed fields."""
        result = {
            'changed': self.changed,
            'prev': self.prev
        }
        flags = self.flags
        if flags & VSlotFlags.SHPARAM:
            result['params'] = [
                {'name': p.name.decode('utf-8', 'replace'), 'values': list(p.values)}
                for p in self.params
            ]
        if flags & VSlotFlags.SCALE:
            result['scale'] = self.scale
        if flags & VSlotFlags.ROTATION:
            result['rotation'] = self.rotation
        if flags & VSlotFlags.OFFSET:
            result['offset'] = list(self.offset)
        if flags & VSlotFlags.SCROLL:
            result['scroll'] = list(self.scroll)
        if flags & VSlotFlags.LAYER:
            result['layer'] = self.layer
        if flags & VSlotFlags.ALPHA:
            result['alpha'] = {'front': self.alpha_front, 'back': self.alpha_back}
        if flags & VSlotFlags.COLOR:
            result['color_scale'] = list(self.color_scale)
        return result
