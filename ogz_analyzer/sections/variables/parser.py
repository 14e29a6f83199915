"""Variable table parser."""
from typing import List, Tuple
import logging

from construct import Float32l, GreedyBytes, Int8ul, Int16ul, Int32ul, Prefixed, Struct

from ...errors import UnknownVarTypeError, error_context
from ..base import BaseSection, decode_text
from .entry import OgzVar, VarType

logger = logging.getLogger(__name__)

VarPrefix = Struct(
    "var_type" / Int8ul,
    "name" / Prefixed(Int16ul, GreedyBytes),
)

StringPayload = Prefixed(Int16ul, GreedyBytes)

class VariableSection(BaseSection):
    """Variable table parser.

    Reads exactly num_vars tagged variables, then the game mode label
    and its trailing reserved byte. An unknown tag stops the table: the
    payload length is unknowable without it.
    """

    def parse(self) -> Tuple[List[OgzVar], str]:
        """Parse variables and game mode.

        Returns:
            (variables, game_mode)
        """
        num_vars = self.context['header'].num_vars
        variables = []

        for i in range(num_vars):
            with error_context(f"variable #{i}"):
                variables.append(self._parse_var(i))

        with error_context("game mode"):
            game_mode = self._read_text('B', 'game mode')
            self.reader.skip(1, 'game mode terminator')

        logger.debug(f"Parsed {len(variables)} variables, game mode {game_mode!r}")
        return variables, game_mode

    def _parse_var(self, index: int) -> OgzVar:
        offset = self.reader.tell()
        prefix = self.reader.parse(VarPrefix)

        if prefix.var_type == VarType.INT:
            value = self.reader.parse(Int32ul)
        elif prefix.var_type == VarType.FLOAT:
            value = self.reader.parse(Float32l)
        elif prefix.var_type == VarType.STRING:
            text_offset = self.reader.tell()
            value = decode_text(self.reader.parse(StringPayload), text_offset, 'string variable')
        else:
            raise UnknownVarTypeError(f"Unknown variable type {prefix.var_type}", offset)

        return OgzVar(
            index=index,
            name=prefix.name,
            var_type=VarType(prefix.var_type),
            value=value
        )