from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .coding import Decoder
from .decode_map import DecodeTable
from .opcode import InstructionDefinition, OperandFields


@dataclass(frozen=True)
class FetchedInstruction:
    """An instruction word plus the extension words its definition asked for."""

    address: int
    word: int
    definition: InstructionDefinition
    x_words: Tuple[int, ...] = ()
    y_words: Tuple[int, ...] = ()

    @property
    def length(self) -> int:
        """Size in bytes, instruction word included."""
        return 2 * (1 + len(self.x_words) + len(self.y_words))

    @property
    def fields(self) -> OperandFields:
        return self.definition.instruction_format.split(self.word)

    @property
    def x_value(self) -> int:
        """Extension words read as the x operand, most significant first."""
        value = 0
        for word in self.x_words:
            value = (value << 16) | word
        return value

    @property
    def y_value(self) -> int:
        value = 0
        for word in self.y_words:
            value = (value << 16) | word
        return value


def fetch_instruction(decoder: Decoder, table: DecodeTable) -> FetchedInstruction:
    """Read one instruction word and its extension words from ``decoder``.

    Raises ``BufferTooShort`` if the stream ends first; the decoder position
    is then left wherever the short read stopped.
    """

    address = decoder.get_addr()
    word = decoder.unsigned_word()
    definition = table.decode(word)
    x_words = tuple(decoder.unsigned_word() for _ in range(definition.extra_word_count_x))
    y_words = tuple(decoder.unsigned_word() for _ in range(definition.extra_word_count_y))
    return FetchedInstruction(
        address=address,
        word=word,
        definition=definition,
        x_words=x_words,
        y_words=y_words,
    )
