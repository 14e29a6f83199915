# ogz_analyzer/sections/variables/entry.py
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

class VarType(IntEnum):
    """Type tag of a map variable."""
    INT = 0
    FLOAT = 1
    STRING = 2

@dataclass
class OgzVar:
    """Single map variable (ivar, fvar or svar)."""
    index: int
    name: bytes          # Raw, not guaranteed to be valid text
    var_type: VarType
    value: Union[int, float, str]

    def to_dict(self) -> dict:
        """Convert entry to dictionary format."""
        return {
            'index': self.index,
            'name': self.name.decode('utf-8', 'replace'),
            'type': self.var_type.name,
            'value': self.value
        }