# ogz_analyzer/__init__.py
"""OGZ map file analyzer package."""
from .parser import OgzFileParser, OgzWorld
from .errors import (
    ChainLengthMismatchError,
    InvalidTextError,
    InvalidWorldSizeError,
    OctreeDepthError,
    OgzParsingError,
    UnexpectedEofError,
    UnknownOctsavTypeError,
    UnknownVarTypeError,
    UnsupportedMagicError,
)

__version__ = '0.1.0'

def decode(data: bytes) -> OgzWorld:
    """Decode a decompressed OGZ buffer."""
    return OgzFileParser().decode(data)

__all__ = [
    'decode',
    'OgzFileParser',
    'OgzWorld',
    'OgzParsingError',
    'UnsupportedMagicError',
    'UnexpectedEofError',
    'UnknownVarTypeError',
    'UnknownOctsavTypeError',
    'InvalidTextError',
    'ChainLengthMismatchError',
    'InvalidWorldSizeError',
    'OctreeDepthError',
]
