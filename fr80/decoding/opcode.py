from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

WORD_MASK = 0xFFFF
WORD_SPACE_SIZE = 0x10000


class FlowType(enum.Enum):
    """Type of flow control assigned to each instruction (if suitable)."""

    NONE = "none"
    CALL = "call"
    JMP = "jmp"
    BRA = "bra"
    INT = "int"
    INTE = "inte"
    RET = "ret"


@dataclass(frozen=True, slots=True)
class OperandFields:
    ri: Optional[int] = None
    rj: Optional[int] = None
    x: Optional[int] = None
    offset: Optional[int] = None  # signed, already multiplied by 2


class InstructionFormat(enum.Enum):
    """Bit layout of the instruction word.

    A  ``[   op          |  Rj   |  Ri   ]``
    B  ``[   op  |       x       |  Ri   ]``
    C  ``[   op          |   x   |  Ri   ]``
    D  ``[   op          |       x       ]``
    E  ``[   op                  |  Ri   ]``
    F  ``[   op    |     offset / 2      ]``
    Z  ``[   op                          ]``
    W  ``[               x               ]`` (literal data)
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    Z = "Z"
    W = "W"

    def split(self, word: int) -> OperandFields:
        """Return the operand fields ``word`` decomposes into for this format."""

        if not 0 <= word <= WORD_MASK:
            raise ValueError(f"Instruction word out of range: {word:#x}")
        ri = word & 0xF
        if self is InstructionFormat.A:
            return OperandFields(ri=ri, rj=(word >> 4) & 0xF)
        if self is InstructionFormat.B:
            return OperandFields(ri=ri, x=(word >> 4) & 0xFF)
        if self is InstructionFormat.C:
            return OperandFields(ri=ri, x=(word >> 4) & 0xF)
        if self is InstructionFormat.D:
            return OperandFields(x=word & 0xFF)
        if self is InstructionFormat.E:
            return OperandFields(ri=ri)
        if self is InstructionFormat.F:
            raw = word & 0x7FF
            signed = raw - 0x800 if raw & 0x400 else raw
            return OperandFields(offset=signed * 2)
        if self is InstructionFormat.W:
            return OperandFields(x=word)
        return OperandFields()


def is_prefix_mask(mask: int) -> bool:
    """True when ``mask`` is a run of high set bits followed by clear bits."""

    if not 0 <= mask <= WORD_MASK:
        return False
    free = ~mask & WORD_MASK
    # free bits must be of the form 0b0..01..1
    return free & (free + 1) == 0


@dataclass(frozen=True, slots=True)
class InstructionDefinition:
    encoding: int
    mask: int
    instruction_format: InstructionFormat
    extra_word_count_x: int
    extra_word_count_y: int
    name: str
    display_format: str
    action: str
    flow_type: FlowType = FlowType.NONE
    is_conditional: bool = False
    has_delay_slot: bool = False

    def __post_init__(self) -> None:
        for label, val in (("encoding", self.encoding), ("mask", self.mask)):
            if not 0 <= val <= WORD_MASK:
                raise ValueError(f"{label} out of range: {val:#x}")
        for label, count in (
            ("extra_word_count_x", self.extra_word_count_x),
            ("extra_word_count_y", self.extra_word_count_y),
        ):
            if not 0 <= count <= 0xFF:
                raise ValueError(f"{label} out of range: {count}")

    @property
    def free_bits(self) -> int:
        return ~self.mask & WORD_MASK

    @property
    def extra_word_count(self) -> int:
        return self.extra_word_count_x + self.extra_word_count_y

    def word_range(self) -> range:
        """Words claimed by this definition, assuming a prefix mask."""
        return range(self.encoding, self.encoding + self.free_bits + 1)

    def covers(self, word: int) -> bool:
        return word & self.mask == self.encoding

    def same_slot(self, other: InstructionDefinition) -> bool:
        return self.encoding == other.encoding and self.mask == other.mask

    def __str__(self) -> str:
        return f"{self.name}({self.encoding:#x})"
