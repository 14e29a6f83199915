"""OGZ file parser."""
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import gzip
import logging
import zlib
from pathlib import Path

from ..errors import OgzParsingError, error_context
from ..sections.entities import EntitySection, GameInfo, OgzEntity
from ..sections.header import HeaderSection, OgzHeader
from ..sections.octree import Cube, OctreeSection
from ..sections.variables import OgzVar, VariableSection
from ..sections.vslots import VSlot, VSlotSection
from ..utils.binary import OgzReader
from .constants import DecodePhase, GZIP_MAGIC

logger = logging.getLogger(__name__)

@dataclass
class OgzWorld:
    """Everything decoded from one OGZ buffer."""
    header: OgzHeader
    variables: List[OgzVar] = field(default_factory=list)
    game_info: Optional[GameInfo] = None
    entities: List[OgzEntity] = field(default_factory=list)
    vslots: List[VSlot] = field(default_factory=list)
    octree: List[Cube] = field(default_factory=list)
    end_offset: int = 0       # Cursor position after the octree
    trailing_bytes: int = 0   # Undecoded data after the octree (lightmaps etc.)

    def iter_cubes(self):
        """Yield every cube in the octree, depth first."""
        for root in self.octree:
            yield from root.walk()

    def octree_stats(self) -> Dict[str, Any]:
        """Summarize the cube tree."""
        kinds = Counter()
        min_size = None
        for cube in self.iter_cubes():
            kinds[cube.kind.name] += 1
            if min_size is None or cube.size < min_size:
                min_size = cube.size
        return {
            'cubes': sum(kinds.values()),
            'kinds': dict(kinds),
            'min_cube_size': min_size
        }

    def to_dict(self, include_octree: bool = False) -> Dict[str, Any]:
        """Convert world to dictionary format."""
        result = {
            'header': self.header.to_dict(),
            'variables': [v.to_dict() for v in self.variables],
            'game_info': self.game_info.to_dict() if self.game_info else None,
            'entities': [e.to_dict() for e in self.entities],
            'vslots': [v.to_dict() for v in self.vslots],
            'octree_stats': self.octree_stats(),
            'end_offset': self.end_offset,
            'trailing_bytes': self.trailing_bytes
        }
        if include_octree:
            result['octree'] = [c.to_dict() for c in self.octree]
        return result

class OgzFileParser:
    """Main parser for OGZ map files.

    decode() works on an already decompressed buffer and performs no I/O;
    parse_file() adds file access and gzip handling.
    """

    def decode(self, data: bytes) -> OgzWorld:
        """Decode a decompressed OGZ buffer.

        Raises:
            OgzParsingError: On the first malformed field; nothing is
                recovered from a failed decode
        """
        reader = OgzReader(data)
        context: Dict[str, Any] = {}

        for phase in DecodePhase:
            with error_context(f"{phase.name.lower()} section"):
                self._decode_phase(reader, phase, context)

        world = OgzWorld(
            header=context['header'],
            variables=context['variables'],
            game_info=context['game_info'],
            entities=context['entities'],
            vslots=context['vslots'],
            octree=context['octree'],
            end_offset=reader.tell(),
            trailing_bytes=reader.remaining
        )
        if world.trailing_bytes:
            logger.debug(f"{world.trailing_bytes} bytes left after octree")
        return world

    def _decode_phase(self, reader: OgzReader, phase: DecodePhase, context: Dict[str, Any]) -> None:
        """Run one section parser, storing its results in context."""
        if phase == DecodePhase.HEADER:
            context['header'] = HeaderSection(reader, context).parse()

        elif phase == DecodePhase.VARIABLES:
            context['variables'], context['game_mode'] = VariableSection(reader, context).parse()

        elif phase == DecodePhase.ENTITIES:
            context['game_info'], context['entities'] = EntitySection(reader, context).parse()

        elif phase == DecodePhase.VSLOTS:
            context['vslots'] = VSlotSection(reader, context).parse()

        elif phase == DecodePhase.OCTREE:
            context['octree'] = OctreeSection(reader, context).parse()

    @staticmethod
    def decompress(data: bytes) -> bytes:
        """Gunzip data if it carries the gzip magic, else return it unchanged."""
        if data[:2] == GZIP_MAGIC:
            return gzip.decompress(data)
        return data

    def _prepare_for_json(self, data: Any) -> Any:
        """Convert data to JSON-serializable format."""
        if isinstance(data, bytes):
            return data.hex()
        elif isinstance(data, dict):
            return {k: self._prepare_for_json(v) for k, v in data.items()}
        elif isinstance(data, (list, tuple)):
            return [self._prepare_for_json(item) for item in data]
        return data

    def parse_file(self, file_path: Path, include_octree: bool = False) -> Dict[str, Any]:
        """Parse an OGZ file and return JSON-ready structured data.

        A decode failure is reported in 'errors' with 'world' set to None.
        """
        errors: List[str] = []
        world = None
        try:
            with open(file_path, 'rb') as f:
                data = self.decompress(f.read())
            logger.debug(f"{file_path}: {len(data)} bytes decompressed")
            world = self.decode(data).to_dict(include_octree)

        except (OSError, EOFError, zlib.error) as e:
            error_msg = f"Failed to read file {file_path}: {e}"
            logger.error(error_msg)
            if logger.isEnabledFor(logging.DEBUG):
                logger.exception("Detailed error:")
            errors.append(error_msg)

        except OgzParsingError as e:
            error_msg = f"Failed to parse file {file_path}: {e}"
            logger.error(error_msg)
            if logger.isEnabledFor(logging.DEBUG):
                logger.exception("Detailed error:")
            errors.append(error_msg)

        return {
            'file_path': str(file_path),
            'world': self._prepare_for_json(world),
            'errors': errors
        }
