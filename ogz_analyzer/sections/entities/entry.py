# ogz_analyzer/sections/entities/entry.py
from dataclasses import dataclass
from typing import Any, Tuple

from construct import Float32l, Int8ul, Int16sl, Struct

EntityRecord = Struct(
    "position" / Float32l[3],
    "attrs" / Int16sl[5],
    "ent_type" / Int8ul,
    "reserved" / Int8ul,
)

@dataclass
class OgzEntity:
    """Single entity record, always 24 bytes."""
    index: int
    position: Tuple[float, float, float]  # (x, y, z)
    attrs: Tuple[int, int, int, int, int]
    ent_type: int
    reserved: int

    SIZE = 24

    @classmethod
    def from_record(cls, index: int, record: Any) -> 'OgzEntity':
        """Build an entity from a parsed EntityRecord."""
        return cls(
            index=index,
            position=tuple(record.position),
            attrs=tuple(record.attrs),
            ent_type=record.ent_type,
            reserved=record.reserved
        )

    def to_dict(self) -> dict:
        """Convert entry to dictionary format."""
        return {
            'index': self.index,
            'position': {
                'x': self.position[0],
                'y': self.position[1],
                'z': self.position[2]
            },
            'attrs': list(self.attrs),
            'type': self.ent_type,
            'reserved': self.reserved
        }

@dataclass
class GameInfo:
    """Game mode label and the words preceding the entity table."""
    game_mode: str
    ents_info_flags: int = 0
    extra_size: int = 0
    num_mru: int = 0     # Texture MRU entries, skipped

    def to_dict(self) -> dict:
        return {
            'game_mode': self.game_mode,
            'ents_info_flags': self.ents_info_flags,
            'extra_size': self.extra_size,
            'num_mru': self.num_mru
        }
