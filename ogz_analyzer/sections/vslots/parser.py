"""VSlot delta-chain parser."""
from typing import Any, List, Optional, Tuple, Union
import logging

from construct import (
    Float32l,
    GreedyBytes,
    Int16ul,
    Int32ul,
    Prefixed,
    PrefixedArray,
    Struct,
)

from ...errors import ChainLengthMismatchError, error_context
from ..base import BaseSection
from .entry import ShaderParam, VSlot
from .flags import VSlotFlags

logger = logging.getLogger(__name__)

ShaderParams = PrefixedArray(Int16ul, Struct(
    "name" / Prefixed(Int16ul, GreedyBytes),
    "values" / Float32l[4],
))

# Optional vslot fields in stream order: (bit, attribute(s), layout)
VSLOT_FIELDS: Tuple[Tuple[VSlotFlags, Union[str, Tuple[str, ...]], Any], ...] = (
    (VSlotFlags.SHPARAM, 'params', ShaderParams),
    (VSlotFlags.SCALE, 'scale', Float32l),
    (VSlotFlags.ROTATION, 'rotation', Int32ul),
    (VSlotFlags.OFFSET, 'offset', Int32ul[2]),
    (VSlotFlags.SCROLL, 'scroll', Float32l[2]),
    (VSlotFlags.LAYER, 'layer', Int32ul),
    (VSlotFlags.ALPHA, ('alpha_front', 'alpha_back'), Float32l[2]),
    (VSlotFlags.COLOR, 'color_scale', Float32l[3]),
)

def _assign(vslot: VSlot, attr: Union[str, Tuple[str, ...]], value: Any) -> None:
    if attr == 'params':
        vslot.params = [ShaderParam(name=p.name, values=tuple(p["values"])) for p in value]
    elif isinstance(attr, tuple):
        for name, item in zip(attr, value):
            setattr(vslot, name, item)
    elif isinstance(value, list):
        setattr(vslot, attr, tuple(value))
    else:
        setattr(vslot, attr, value)

class VSlotSection(BaseSection):
    """VSlot delta-chain parser.

    The chain is a sequence of signed 32-bit records:
    - changed < 0: append -changed default vslots, nothing else follows
    - changed >= 0: a 32-bit back-reference, then the fields gated by
      the changed mask, forming one vslot

    Every record grows the list by at least one, so the loop always
    terminates; a run that passes num_vslots is an error.
    """

    def parse(self) -> List[VSlot]:
        """Parse the vslot chain."""
        num_vslots = self.context['header'].num_vslots
        vslots: List[VSlot] = []

        while len(vslots) < num_vslots:
            index = len(vslots)
            with error_context(f"vslot #{index}"):
                offset = self.reader.tell()
                changed = self.reader.read_i32()
                if changed < 0:
                    count = -changed
                    if index + count > num_vslots:
                        raise ChainLengthMismatchError(
                            f"Run of {count} default vslots at #{index} "
                            f"overshoots declared count {num_vslots}",
                            offset
                        )
                    vslots.extend(VSlot() for _ in range(count))
                else:
                    # Back-reference into the slot list; kept opaque
                    prev = self.reader.read_i32()
                    vslots.append(self.parse_vslot(changed, prev))

        logger.debug(f"Parsed {len(vslots)} vslots")
        return vslots

    def parse_vslot(self, changed: int, prev: Optional[int] = None) -> VSlot:
        """Read one vslot payload gated by the changed mask."""
        vslot = VSlot(changed=changed, prev=prev)
        for flag, attr, layout in VSLOT_FIELDS:
            if changed & flag:
                _assign(vslot, attr, self.reader.parse(layout))
        return vslot
