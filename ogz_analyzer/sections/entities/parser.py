# ogz_analyzer/sections/entities/parser.py
from typing import List, Tuple
import logging

from ...errors import error_context
from ..base import BaseSection
from .entry import EntityRecord, GameInfo, OgzEntity

logger = logging.getLogger(__name__)

class EntitySection(BaseSection):
    """Entity table parser.

    Preceded by three u16 words (entity info flags, extra size, MRU
    count) and the MRU texture index list, which is skipped. Each entity
    is a fixed 24-byte record.
    """

    def parse(self) -> Tuple[GameInfo, List[OgzEntity]]:
        """Parse the MRU block and entity table.

        Returns:
            (game_info, entities)
        """
        with error_context("entity table prelude"):
            ents_info_flags, extra_size, num_mru = self.reader.read_struct('3H')
            self.reader.skip(2 * num_mru, 'texture MRU table')

        game_info = GameInfo(
            game_mode=self.context.get('game_mode', ''),
            ents_info_flags=ents_info_flags,
            extra_size=extra_size,
            num_mru=num_mru
        )

        num_ents = self.context['header'].num_ents
        entities = []
        for i in range(num_ents):
            with error_context(f"entity #{i}"):
                record = self.reader.parse(EntityRecord)
            entities.append(OgzEntity.from_record(i, record))

        logger.debug(f"Skipped {num_mru} MRU entries, parsed {len(entities)} entities")
        return game_info, entities
