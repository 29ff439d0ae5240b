"""Token vocabularies of the ``display_format`` and ``action`` strings.

Every instruction definition carries two small single-character languages.
This module documents them and lets catalogs be checked against them; it
does not render operands or execute actions. Disassemblers and emulators
built on the decode table own that.

Display format (``x`` is the constant operand, ``c`` the coprocessor one)::

    # ( ) + , - ; @ space   copied as is
    &   outputs a ,
    2   x must be multiplied by 2 (e.g. address of 16-bit data)
    4   x must be multiplied by 4 (e.g. address of 32-bit data)
    r   x is a relative address
    I   x is loaded from Ri if valid (0 otherwise)
    J   x is loaded from Rj if valid (0 otherwise)
    b   shift2: 16 is added to x
    x   register bitmap in x is reversed (bit #8 of x is set)
    y   register bitmap in x covers R8-R15 rather than R0-R7 (8 added to c)
    s   x as signed hex
    u   x as unsigned hex
    n   x as negative hex
    d   x as decimal
    a   x as ASCII chars
    f   x as a float: hi-half dividend, lo-half divider
    q   x as a ratio: hi-half / lo-half
    p   x as a pair of hex values: hi-half, lo-half
    z   x as a bitmap of register IDs (affected by earlier x and y)
    A C F M P S   "AC", "CCR", "FP", "ILM", "PS", "SP"
    i j   general register named by Ri / Rj
    g h   dedicated register named by Ri / Rj
    k l   coprocessor register named by Ri / Rj
    v   current PC as a vector id (0xFF first, counting down to 0x00)
    c   coprocessor operation
    T   vector table tag, precedes ``v`` on literal vector entries

Action::

    !   jump
    ?   branch
    (   call
    )   return
    _   instruction has a delay slot
    A C F M P S   current register is AC, CCR, FP, ILM, PS, SP
    i j   current register is Ri / Rj
    w   current register is marked invalid
    v   current register is marked valid and loaded with the given value
    x   current register is undefined
"""

from __future__ import annotations

import enum
from typing import Dict, FrozenSet, Iterable, List

from .opcode import InstructionDefinition


class DisplayTokenKind(enum.Enum):
    LITERAL = "literal"
    MODIFIER = "modifier"
    VALUE = "value"
    FIXED_REGISTER = "fixed_register"
    REGISTER = "register"
    SPECIAL = "special"


class ActionTokenKind(enum.Enum):
    FLOW = "flow"
    DELAY_SLOT = "delay_slot"
    REGISTER = "register"
    EFFECT = "effect"


DISPLAY_LITERALS: FrozenSet[str] = frozenset("#()+,-;@ ")

DISPLAY_TOKENS: Dict[str, DisplayTokenKind] = {
    **{ch: DisplayTokenKind.LITERAL for ch in DISPLAY_LITERALS},
    "&": DisplayTokenKind.LITERAL,
    "2": DisplayTokenKind.MODIFIER,
    "4": DisplayTokenKind.MODIFIER,
    "r": DisplayTokenKind.MODIFIER,
    "I": DisplayTokenKind.MODIFIER,
    "J": DisplayTokenKind.MODIFIER,
    "b": DisplayTokenKind.MODIFIER,
    "x": DisplayTokenKind.MODIFIER,
    "y": DisplayTokenKind.MODIFIER,
    "s": DisplayTokenKind.VALUE,
    "u": DisplayTokenKind.VALUE,
    "n": DisplayTokenKind.VALUE,
    "d": DisplayTokenKind.VALUE,
    "a": DisplayTokenKind.VALUE,
    "f": DisplayTokenKind.VALUE,
    "q": DisplayTokenKind.VALUE,
    "p": DisplayTokenKind.VALUE,
    "z": DisplayTokenKind.VALUE,
    "A": DisplayTokenKind.FIXED_REGISTER,
    "C": DisplayTokenKind.FIXED_REGISTER,
    "F": DisplayTokenKind.FIXED_REGISTER,
    "M": DisplayTokenKind.FIXED_REGISTER,
    "P": DisplayTokenKind.FIXED_REGISTER,
    "S": DisplayTokenKind.FIXED_REGISTER,
    "i": DisplayTokenKind.REGISTER,
    "j": DisplayTokenKind.REGISTER,
    "g": DisplayTokenKind.REGISTER,
    "h": DisplayTokenKind.REGISTER,
    "k": DisplayTokenKind.REGISTER,
    "l": DisplayTokenKind.REGISTER,
    "v": DisplayTokenKind.SPECIAL,
    "c": DisplayTokenKind.SPECIAL,
    "T": DisplayTokenKind.SPECIAL,
}

# Text emitted for the fixed register tokens of display formats.
FIXED_REGISTER_NAMES: Dict[str, str] = {
    "A": "AC",
    "C": "CCR",
    "F": "FP",
    "M": "ILM",
    "P": "PS",
    "S": "SP",
}

ACTION_TOKENS: Dict[str, ActionTokenKind] = {
    "!": ActionTokenKind.FLOW,
    "?": ActionTokenKind.FLOW,
    "(": ActionTokenKind.FLOW,
    ")": ActionTokenKind.FLOW,
    "_": ActionTokenKind.DELAY_SLOT,
    "A": ActionTokenKind.REGISTER,
    "C": ActionTokenKind.REGISTER,
    "F": ActionTokenKind.REGISTER,
    "M": ActionTokenKind.REGISTER,
    "P": ActionTokenKind.REGISTER,
    "S": ActionTokenKind.REGISTER,
    "i": ActionTokenKind.REGISTER,
    "j": ActionTokenKind.REGISTER,
    "w": ActionTokenKind.EFFECT,
    "v": ActionTokenKind.EFFECT,
    "x": ActionTokenKind.EFFECT,
}


def unknown_display_tokens(display_format: str) -> List[str]:
    return [ch for ch in display_format if ch not in DISPLAY_TOKENS]


def unknown_action_tokens(action: str) -> List[str]:
    return [ch for ch in action if ch not in ACTION_TOKENS]


def token_errors(definitions: Iterable[InstructionDefinition]) -> List[str]:
    """Describe every definition whose strings step outside the vocabularies."""

    errors: List[str] = []
    for definition in definitions:
        bad_display = unknown_display_tokens(definition.display_format)
        if bad_display:
            errors.append(
                f"{definition}: unknown display tokens {''.join(bad_display)!r} "
                f"in {definition.display_format!r}"
            )
        bad_action = unknown_action_tokens(definition.action)
        if bad_action:
            errors.append(
                f"{definition}: unknown action tokens {''.join(bad_action)!r} "
                f"in {definition.action!r}"
            )
    return errors


__all__ = [
    "ACTION_TOKENS",
    "ActionTokenKind",
    "DISPLAY_LITERALS",
    "DISPLAY_TOKENS",
    "DisplayTokenKind",
    "FIXED_REGISTER_NAMES",
    "token_errors",
    "unknown_action_tokens",
    "unknown_display_tokens",
]
