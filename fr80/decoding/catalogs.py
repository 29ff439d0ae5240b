"""Instruction definition catalogs for the FR instruction set.

The base catalog uses the official Fujitsu mnemonics and partitions the word
space into prefix-masked ranges. The overlay catalogs reuse base
``(encoding, mask)`` pairs exactly and only swap the name, display format and
action, so enabling one never changes which words decode to something.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

from .opcode import FlowType, InstructionDefinition, InstructionFormat

Catalog = Tuple[InstructionDefinition, ...]

A = InstructionFormat.A
B = InstructionFormat.B
C = InstructionFormat.C
D = InstructionFormat.D
E = InstructionFormat.E
F = InstructionFormat.F
Z = InstructionFormat.Z
W = InstructionFormat.W

NONE = FlowType.NONE
CALL = FlowType.CALL
JMP = FlowType.JMP
BRA = FlowType.BRA
INT = FlowType.INT
INTE = FlowType.INTE
RET = FlowType.RET


def _op(
    encoding: int,
    mask: int,
    fmt: InstructionFormat,
    n_x: int,
    n_y: int,
    name: str,
    display_format: str,
    action: str,
    flow_type: FlowType = NONE,
    *,
    conditional: bool = False,
    delay_slot: bool = False,
) -> InstructionDefinition:
    return InstructionDefinition(
        encoding=encoding,
        mask=mask,
        instruction_format=fmt,
        extra_word_count_x=n_x,
        extra_word_count_y=n_y,
        name=name,
        display_format=display_format,
        action=action,
        flow_type=flow_type,
        is_conditional=conditional,
        has_delay_slot=delay_slot,
    )


# fmt: off
# Safety net for words no real instruction claims.
CATCH_ALL_CATALOG: Catalog = (
    _op(0x0000, 0x0000, W, 0, 0, "UNK",    "",            ""),
)

#      encod   mask    fmt nX nY name      display        action  flow
BASE_CATALOG: Catalog = (
    _op(0x0000, 0xFF00, A, 0, 0, "LD",     "@(A&j),i",    "iw"),
    _op(0x0100, 0xFF00, A, 0, 0, "LDUH",   "@(A&j),i",    "iw"),
    _op(0x0200, 0xFF00, A, 0, 0, "LDUB",   "@(A&j),i",    "iw"),
    _op(0x0300, 0xFF00, C, 0, 0, "LD",     "@(S&4u),i",   "iw"),
    _op(0x0400, 0xFF00, A, 0, 0, "LD",     "@j,i;Ju",     "iw"),
    _op(0x0500, 0xFF00, A, 0, 0, "LDUH",   "@j,i;Ju",     "iw"),
    _op(0x0600, 0xFF00, A, 0, 0, "LDUB",   "@j,i;Ju",     "iw"),
    _op(0x0700, 0xFFF0, E, 0, 0, "LD",     "@S+,i",       "iwSw"),
    _op(0x0710, 0xFFF0, E, 0, 0, "MOV",    "i,P",         "Pw"),
    _op(0x0780, 0xFFFF, E, 0, 0, "LD",     "@S+,g",       "Sw"),
    _op(0x0781, 0xFFFF, E, 0, 0, "LD",     "@S+,g",       "Sw"),
    _op(0x0782, 0xFFFF, E, 0, 0, "LD",     "@S+,g",       "Sw"),
    _op(0x0783, 0xFFFF, E, 0, 0, "LD",     "@S+,g",       "Sw"),
    _op(0x0784, 0xFFFF, E, 0, 0, "LD",     "@S+,g",       "Sw"),
    _op(0x0785, 0xFFFF, E, 0, 0, "LD",     "@S+,g",       "Sw"),
    _op(0x0790, 0xFFFF, Z, 0, 0, "LD",     "@S+,P",       "Sw"),
    _op(0x0800, 0xFF00, D, 0, 0, "DMOV",   "@4u,A",       "Aw"),
    _op(0x0900, 0xFF00, D, 0, 0, "DMOVH",  "@2u,A",       "Aw"),
    _op(0x0A00, 0xFF00, D, 0, 0, "DMOVB",  "@u,A",        "Aw"),
    _op(0x0B00, 0xFF00, D, 0, 0, "DMOV",   "@4u,@-S",     "Sw"),
    _op(0x0C00, 0xFF00, D, 0, 0, "DMOV",   "@4u,@A+",     "Aw"),
    _op(0x0D00, 0xFF00, D, 0, 0, "DMOVH",  "@2u,@A+",     "Aw"),
    _op(0x0E00, 0xFF00, D, 0, 0, "DMOVB",  "@u,@A+",      "Aw"),
    _op(0x0F00, 0xFF00, D, 0, 0, "ENTER",  "#4u",         "SwFw"),
    _op(0x1000, 0xFF00, A, 0, 0, "ST",     "i,@(A&j)",    ""),
    _op(0x1100, 0xFF00, A, 0, 0, "STH",    "i,@(A&j)",    ""),
    _op(0x1200, 0xFF00, A, 0, 0, "STB",    "i,@(A&j)",    ""),
    _op(0x1300, 0xFF00, C, 0, 0, "ST",     "i,@(S&4u)",   ""),
    _op(0x1400, 0xFF00, A, 0, 0, "ST",     "i,@j;Ju",     ""),
    _op(0x1500, 0xFF00, A, 0, 0, "STH",    "i,@j;Ju",     ""),
    _op(0x1600, 0xFF00, A, 0, 0, "STB",    "i,@j;Ju",     ""),
    _op(0x1700, 0xFFF0, E, 0, 0, "ST",     "i,@-S",       "Sw"),
    _op(0x1710, 0xFFF0, E, 0, 0, "MOV",    "P,i",         "iw"),
    _op(0x1780, 0xFFFF, E, 0, 0, "ST",     "g,@-S",       "Sw"),
    _op(0x1781, 0xFFFF, E, 0, 0, "ST",     "g,@-S",       "Sw"),
    _op(0x1782, 0xFFFF, E, 0, 0, "ST",     "g,@-S",       "Sw"),
    _op(0x1783, 0xFFFF, E, 0, 0, "ST",     "g,@-S",       "Sw"),
    _op(0x1784, 0xFFFF, E, 0, 0, "ST",     "g,@-S",       "Sw"),
    _op(0x1785, 0xFFFF, E, 0, 0, "ST",     "g,@-S",       "Sw"),
    _op(0x1790, 0xFFFF, Z, 0, 0, "ST",     "P,@-S",       "Sw"),
    _op(0x1800, 0xFF00, D, 0, 0, "DMOV",   "A,@4u",       ""),
    _op(0x1900, 0xFF00, D, 0, 0, "DMOVH",  "A,@2u",       ""),
    _op(0x1A00, 0xFF00, D, 0, 0, "DMOVB",  "A,@u",        ""),
    _op(0x1B00, 0xFF00, D, 0, 0, "DMOV",   "@S+,@4u",     "Sw"),
    _op(0x1C00, 0xFF00, D, 0, 0, "DMOV",   "@A+,@4u",     "Aw"),
    _op(0x1D00, 0xFF00, D, 0, 0, "DMOVH",  "@A+,@2u",     "Aw"),
    _op(0x1E00, 0xFF00, D, 0, 0, "DMOVB",  "@A+,@u",      "Aw"),
    _op(0x1F00, 0xFF00, D, 0, 0, "INT",    "#u",          "(",    INT),
    # FP relative, 8-bit scaled displacement
    _op(0x2000, 0xF000, B, 0, 0, "LD",     "@(F&4s),i",   "iw"),
    _op(0x3000, 0xF000, B, 0, 0, "ST",     "i,@(F&4s)",   ""),
    _op(0x4000, 0xF000, B, 0, 0, "LDUH",   "@(F&2s),i",   "iw"),
    _op(0x5000, 0xF000, B, 0, 0, "STH",    "i,@(F&2s)",   ""),
    _op(0x6000, 0xF000, B, 0, 0, "LDUB",   "@(F&s),i",    "iw"),
    _op(0x7000, 0xF000, B, 0, 0, "STB",    "i,@(F&s)",    ""),
    # bit, logic and dedicated register operations
    _op(0x8000, 0xFF00, C, 0, 0, "BANDL",  "#u,@i;Iu",    ""),
    _op(0x8100, 0xFF00, C, 0, 0, "BANDH",  "#u,@i;Iu",    ""),
    _op(0x8200, 0xFF00, A, 0, 0, "AND",    "j,i",         "iw"),
    _op(0x8300, 0xFF00, D, 0, 0, "ANDCCR", "#u",          ""),
    _op(0x8400, 0xFF00, A, 0, 0, "AND",    "j,@i;Iu",     ""),
    _op(0x8500, 0xFF00, A, 0, 0, "ANDH",   "j,@i;Iu",     ""),
    _op(0x8600, 0xFF00, A, 0, 0, "ANDB",   "j,@i;Iu",     ""),
    _op(0x8700, 0xFF00, D, 0, 0, "STILM",  "#u",          ""),
    _op(0x8800, 0xFF00, C, 0, 0, "BTSTL",  "#u,@i;Iu",    ""),
    _op(0x8900, 0xFF00, C, 0, 0, "BTSTH",  "#u,@i;Iu",    ""),
    _op(0x8A00, 0xFF00, A, 0, 0, "XCHB",   "@j,i;Ju",     "iw"),
    _op(0x8B00, 0xFF00, A, 0, 0, "MOV",    "j,i",         "iw"),
    _op(0x8C00, 0xFF00, D, 0, 0, "LDM0",   "z",           "Sw"),
    _op(0x8D00, 0xFF00, D, 0, 0, "LDM1",   "y",           "Sw"),
    _op(0x8E00, 0xFF00, D, 0, 0, "STM0",   "xz",          "Sw"),
    _op(0x8F00, 0xFF00, D, 0, 0, "STM1",   "xy",          "Sw"),
    _op(0x9000, 0xFF00, C, 0, 0, "BORL",   "#u,@i;Iu",    ""),
    _op(0x9100, 0xFF00, C, 0, 0, "BORH",   "#u,@i;Iu",    ""),
    _op(0x9200, 0xFF00, A, 0, 0, "OR",     "j,i",         "iw"),
    _op(0x9300, 0xFF00, D, 0, 0, "ORCCR",  "#u",          ""),
    _op(0x9400, 0xFF00, A, 0, 0, "OR",     "j,@i;Iu",     ""),
    _op(0x9500, 0xFF00, A, 0, 0, "ORH",    "j,@i;Iu",     ""),
    _op(0x9600, 0xFF00, A, 0, 0, "ORB",    "j,@i;Iu",     ""),
    _op(0x9700, 0xFFF0, E, 0, 0, "JMP",    "@i;Iu",       "!",    JMP),
    _op(0x9710, 0xFFF0, E, 0, 0, "CALL",   "@i;Iu",       "(",    CALL),
    _op(0x9720, 0xFFFF, Z, 0, 0, "RET",    "",            ")",    RET),
    _op(0x9730, 0xFFFF, Z, 0, 0, "RETI",   "",            ")",    RET),
    _op(0x9740, 0xFFF0, E, 0, 0, "DIV0S",  "i",           "iw"),
    _op(0x9750, 0xFFF0, E, 0, 0, "DIV0U",  "i",           "iw"),
    _op(0x9760, 0xFFF0, E, 0, 0, "DIV1",   "i",           "iw"),
    _op(0x9770, 0xFFF0, E, 0, 0, "DIV2",   "i",           "iw"),
    _op(0x9780, 0xFFF0, E, 0, 0, "EXTSB",  "i",           "iw"),
    _op(0x9790, 0xFFF0, E, 0, 0, "EXTUB",  "i",           "iw"),
    _op(0x97A0, 0xFFF0, E, 0, 0, "EXTSH",  "i",           "iw"),
    _op(0x97B0, 0xFFF0, E, 0, 0, "EXTUH",  "i",           "iw"),
    _op(0x9800, 0xFF00, C, 0, 0, "BEORL",  "#u,@i;Iu",    ""),
    _op(0x9900, 0xFF00, C, 0, 0, "BEORH",  "#u,@i;Iu",    ""),
    _op(0x9A00, 0xFF00, A, 0, 0, "EOR",    "j,i",         "iw"),
    _op(0x9B00, 0xFF00, C, 1, 0, "LDI:20", "#u,i",        "iv"),
    _op(0x9C00, 0xFF00, A, 0, 0, "EOR",    "j,@i;Iu",     ""),
    _op(0x9D00, 0xFF00, A, 0, 0, "EORH",   "j,@i;Iu",     ""),
    _op(0x9E00, 0xFF00, A, 0, 0, "EORB",   "j,@i;Iu",     ""),
    # delayed jumps and the 0x9Fxx extension block
    _op(0x9F00, 0xFFF0, E, 0, 0, "JMP:D",  "@i;Iu",       "_!",   JMP, delay_slot=True),
    _op(0x9F10, 0xFFF0, E, 0, 0, "CALL:D", "@i;Iu",       "_(",   CALL, delay_slot=True),
    _op(0x9F20, 0xFFFF, Z, 0, 0, "RET:D",  "",            "_)",   RET, delay_slot=True),
    _op(0x9F30, 0xFFFF, Z, 0, 0, "INTE",   "",            "",     INTE),
    _op(0x9F60, 0xFFFF, Z, 0, 0, "DIV3",   "",            ""),
    _op(0x9F70, 0xFFFF, Z, 0, 0, "DIV4S",  "",            ""),
    _op(0x9F80, 0xFFF0, E, 2, 0, "LDI:32", "#u,i",        "iv"),
    _op(0x9F90, 0xFFFF, Z, 0, 0, "LEAVE",  "",            ""),
    _op(0x9FA0, 0xFFFF, Z, 0, 0, "NOP",    "",            ""),
    _op(0x9FC0, 0xFFF0, E, 0, 1, "COPOP",  "#u,#c,l,k",   ""),
    _op(0x9FD0, 0xFFF0, E, 0, 1, "COPLD",  "#u,#c,j,k",   ""),
    _op(0x9FE0, 0xFFF0, E, 0, 1, "COPST",  "#u,#c,l,i",   "iw"),
    _op(0x9FF0, 0xFFF0, E, 0, 1, "COPSV",  "#u,#c,l,i",   "iw"),
    # arithmetic and shifts
    _op(0xA000, 0xFF00, C, 0, 0, "ADDN",   "#u,i",        "iw"),
    _op(0xA100, 0xFF00, C, 0, 0, "ADDN2",  "#n,i",        "iw"),
    _op(0xA200, 0xFF00, A, 0, 0, "ADDN",   "j,i",         "iw"),
    _op(0xA300, 0xFF00, D, 0, 0, "ADDSP",  "#4s",         "Sw"),
    _op(0xA400, 0xFF00, C, 0, 0, "ADD",    "#u,i",        "iw"),
    _op(0xA500, 0xFF00, C, 0, 0, "ADD2",   "#n,i",        "iw"),
    _op(0xA600, 0xFF00, A, 0, 0, "ADD",    "j,i",         "iw"),
    _op(0xA700, 0xFF00, A, 0, 0, "ADDC",   "j,i",         "iw"),
    _op(0xA800, 0xFF00, C, 0, 0, "CMP",    "#u,i",        "iw"),
    _op(0xA900, 0xFF00, C, 0, 0, "CMP2",   "#n,i",        "iw"),
    _op(0xAA00, 0xFF00, A, 0, 0, "CMP",    "j,i",         "iw"),
    _op(0xAB00, 0xFF00, A, 0, 0, "MULU",   "j,i",         "iw"),
    _op(0xAC00, 0xFF00, A, 0, 0, "SUB",    "j,i",         "iw"),
    _op(0xAD00, 0xFF00, A, 0, 0, "SUBC",   "j,i",         "iw"),
    _op(0xAE00, 0xFF00, A, 0, 0, "SUBN",   "j,i",         "iw"),
    _op(0xAF00, 0xFF00, A, 0, 0, "MUL",    "j,i",         "iw"),
    _op(0xB000, 0xFF00, C, 0, 0, "LSR",    "#d,i",        "iw"),
    _op(0xB100, 0xFF00, C, 0, 0, "LSR2",   "#d,i",        "iw"),
    _op(0xB200, 0xFF00, A, 0, 0, "LSR",    "j,i",         "iw"),
    _op(0xB300, 0xFFF0, A, 0, 0, "MOV",    "i,h",         ""),
    _op(0xB310, 0xFFF0, A, 0, 0, "MOV",    "i,h",         ""),
    _op(0xB320, 0xFFF0, A, 0, 0, "MOV",    "i,h",         ""),
    _op(0xB330, 0xFFF0, A, 0, 0, "MOV",    "i,h",         ""),
    _op(0xB340, 0xFFF0, A, 0, 0, "MOV",    "i,h",         ""),
    _op(0xB350, 0xFFF0, A, 0, 0, "MOV",    "i,h",         ""),
    _op(0xB400, 0xFF00, C, 0, 0, "LSL",    "#d,i",        "iw"),
    _op(0xB500, 0xFF00, C, 0, 0, "LSL2",   "#d,i",        "iw"),
    _op(0xB600, 0xFF00, A, 0, 0, "LSL",    "j,i",         "iw"),
    _op(0xB700, 0xFFF0, A, 0, 0, "MOV",    "h,i",         "iw"),
    _op(0xB710, 0xFFF0, A, 0, 0, "MOV",    "h,i",         "iw"),
    _op(0xB720, 0xFFF0, A, 0, 0, "MOV",    "h,i",         "iw"),
    _op(0xB730, 0xFFF0, A, 0, 0, "MOV",    "h,i",         "iw"),
    _op(0xB740, 0xFFF0, A, 0, 0, "MOV",    "h,i",         "iw"),
    _op(0xB750, 0xFFF0, A, 0, 0, "MOV",    "h,i",         "iw"),
    _op(0xB800, 0xFF00, C, 0, 0, "ASR",    "#d,i",        "iw"),
    _op(0xB900, 0xFF00, C, 0, 0, "ASR2",   "#d,i",        "iw"),
    _op(0xBA00, 0xFF00, A, 0, 0, "ASR",    "j,i",         "iw"),
    _op(0xBB00, 0xFF00, A, 0, 0, "MULUH",  "j,i",         "iw"),
    _op(0xBC00, 0xFF00, C, 0, 0, "LDRES",  "@i+,#u;Iu",   ""),
    _op(0xBD00, 0xFF00, C, 0, 0, "STRES",  "#u,@i+;Iu",   ""),
    _op(0xBF00, 0xFF00, A, 0, 0, "MULH",   "j,i",         "iw"),
    _op(0xC000, 0xF000, B, 0, 0, "LDI:8",  "#u,i",        "iw"),
    # 11-bit relative calls, then 8-bit relative branches
    _op(0xD000, 0xF800, F, 0, 0, "CALL",   "2ru",         "(",    CALL),
    _op(0xD800, 0xF800, F, 0, 0, "CALL:D", "2ru",         "_(",   CALL, delay_slot=True),
    _op(0xE000, 0xFF00, D, 0, 0, "BRA",    "2ru",         "!",    JMP),
    _op(0xE100, 0xFF00, D, 0, 0, "BNO",    "2ru",         "?"),
    _op(0xE200, 0xFF00, D, 0, 0, "BEQ",    "2ru",         "?",    BRA, conditional=True),
    _op(0xE300, 0xFF00, D, 0, 0, "BNE",    "2ru",         "?",    BRA, conditional=True),
    _op(0xE400, 0xFF00, D, 0, 0, "BC",     "2ru",         "?",    BRA, conditional=True),
    _op(0xE500, 0xFF00, D, 0, 0, "BNC",    "2ru",         "?",    BRA, conditional=True),
    _op(0xE600, 0xFF00, D, 0, 0, "BN",     "2ru",         "?",    BRA, conditional=True),
    _op(0xE700, 0xFF00, D, 0, 0, "BP",     "2ru",         "?",    BRA, conditional=True),
    _op(0xE800, 0xFF00, D, 0, 0, "BV",     "2ru",         "?",    BRA, conditional=True),
    _op(0xE900, 0xFF00, D, 0, 0, "BNV",    "2ru",         "?",    BRA, conditional=True),
    _op(0xEA00, 0xFF00, D, 0, 0, "BLT",    "2ru",         "?",    BRA, conditional=True),
    _op(0xEB00, 0xFF00, D, 0, 0, "BGE",    "2ru",         "?",    BRA, conditional=True),
    _op(0xEC00, 0xFF00, D, 0, 0, "BLE",    "2ru",         "?",    BRA, conditional=True),
    _op(0xED00, 0xFF00, D, 0, 0, "BGT",    "2ru",         "?",    BRA, conditional=True),
    _op(0xEE00, 0xFF00, D, 0, 0, "BLS",    "2ru",         "?",    BRA, conditional=True),
    _op(0xEF00, 0xFF00, D, 0, 0, "BHI",    "2ru",         "?",    BRA, conditional=True),
    _op(0xF000, 0xFF00, D, 0, 0, "BRA:D",  "2ru",         "_!",   JMP, delay_slot=True),
    _op(0xF100, 0xFF00, D, 0, 0, "BNO:D",  "2ru",         "_?",   NONE, delay_slot=True),
    _op(0xF200, 0xFF00, D, 0, 0, "BEQ:D",  "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xF300, 0xFF00, D, 0, 0, "BNE:D",  "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xF400, 0xFF00, D, 0, 0, "BC:D",   "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xF500, 0xFF00, D, 0, 0, "BNC:D",  "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xF600, 0xFF00, D, 0, 0, "BN:D",   "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xF700, 0xFF00, D, 0, 0, "BP:D",   "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xF800, 0xFF00, D, 0, 0, "BV:D",   "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xF900, 0xFF00, D, 0, 0, "BNV:D",  "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xFA00, 0xFF00, D, 0, 0, "BLT:D",  "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xFB00, 0xFF00, D, 0, 0, "BGE:D",  "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xFC00, 0xFF00, D, 0, 0, "BLE:D",  "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xFD00, 0xFF00, D, 0, 0, "BGT:D",  "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xFE00, 0xFF00, D, 0, 0, "BLS:D",  "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
    _op(0xFF00, 0xFF00, D, 0, 0, "BHI:D",  "2ru",         "_?",   BRA, conditional=True, delay_slot=True),
)

# Stack-pointer based loads/stores shown as PUSH/POP.
STACK_CATALOG: Catalog = (
    _op(0x0700, 0xFFF0, E, 0, 0, "POP",    "i",           ""),
    _op(0x0780, 0xFFFF, E, 0, 0, "POP",    "g",           ""),
    _op(0x0781, 0xFFFF, E, 0, 0, "POP",    "g",           ""),
    _op(0x0782, 0xFFFF, E, 0, 0, "POP",    "g",           ""),
    _op(0x0783, 0xFFFF, E, 0, 0, "POP",    "g",           ""),
    _op(0x0784, 0xFFFF, E, 0, 0, "POP",    "g",           ""),
    _op(0x0785, 0xFFFF, E, 0, 0, "POP",    "g",           ""),
    _op(0x0790, 0xFFFF, Z, 0, 0, "POP",    "P",           ""),
    _op(0x0B00, 0xFF00, D, 0, 0, "PUSH",   "@4u",         ""),
    _op(0x1700, 0xFFF0, E, 0, 0, "PUSH",   "i",           ""),
    _op(0x1780, 0xFFFF, E, 0, 0, "PUSH",   "g",           ""),
    _op(0x1781, 0xFFFF, E, 0, 0, "PUSH",   "g",           ""),
    _op(0x1782, 0xFFFF, E, 0, 0, "PUSH",   "g",           ""),
    _op(0x1783, 0xFFFF, E, 0, 0, "PUSH",   "g",           ""),
    _op(0x1784, 0xFFFF, E, 0, 0, "PUSH",   "g",           ""),
    _op(0x1785, 0xFFFF, E, 0, 0, "PUSH",   "g",           ""),
    _op(0x1790, 0xFFFF, Z, 0, 0, "PUSH",   "P",           ""),
    _op(0x1B00, 0xFF00, D, 0, 0, "POP",    "@u",          ""),
    _op(0x8C00, 0xFF00, D, 0, 0, "POP",    "z",           ""),
    _op(0x8D00, 0xFF00, D, 0, 0, "POP",    "y",           ""),
    _op(0x8E00, 0xFF00, D, 0, 0, "PUSH",   "xz",          ""),
    _op(0x8F00, 0xFF00, D, 0, 0, "PUSH",   "xy",          ""),
)

# "+16" shift opcodes (LSR2, LSL2, ASR2) with a combined shift distance.
SHIFT_CATALOG: Catalog = (
    _op(0xB100, 0xFF00, C, 0, 0, "LSR",    "#bd,i",       "iw"),
    _op(0xB500, 0xFF00, C, 0, 0, "LSL",    "#bd,i",       "iw"),
    _op(0xB900, 0xFF00, C, 0, 0, "ASR",    "#bd,i",       "iw"),
)

# AC-dedicated DMOV opcodes shown as regular loads/stores.
DMOV_CATALOG: Catalog = (
    _op(0x0800, 0xFF00, D, 0, 0, "LD",     "@4u,A",       ""),
    _op(0x0900, 0xFF00, D, 0, 0, "LDUH",   "@2u,A",       ""),
    _op(0x0A00, 0xFF00, D, 0, 0, "LDUB",   "@u,A",        ""),
    _op(0x1800, 0xFF00, D, 0, 0, "ST",     "A,@4u",       ""),
    _op(0x1900, 0xFF00, D, 0, 0, "STUH",   "A,@2u",       ""),
    _op(0x1A00, 0xFF00, D, 0, 0, "STUB",   "A,@u",        ""),
)

# Dedicated opcodes working on ILM, CCR and SP shown like the generic ones.
SPECIALS_CATALOG: Catalog = (
    _op(0x8300, 0xFF00, D, 0, 0, "AND",    "#u,C",        "Cw"),
    _op(0x8700, 0xFF00, D, 0, 0, "MOV",    "#u,M",        ""),
    _op(0x9300, 0xFF00, D, 0, 0, "OR",     "#u,C",        "Cw"),
    _op(0xA300, 0xFF00, D, 0, 0, "ADD",    "#4s,S",       ""),
)
# fmt: on


class DataKind(IntEnum):
    """Kinds of literal data a disassembler may be asked to render."""

    WORD = 0
    LONG = 1
    LONG_NUM = 2
    VECTOR = 3
    RATIONAL = 4


# Pseudo definitions for literal data, keyed by DataKind rather than by word.
# fmt: off
DATA_CATALOG: Dict[DataKind, InstructionDefinition] = {
    DataKind.WORD:     _op(0x0000, 0x0000, W, 0, 0, "DW",     "u;a",         ""),
    DataKind.LONG:     _op(0x0000, 0x0000, W, 1, 0, "DL",     "u;a",         ""),
    DataKind.LONG_NUM: _op(0x0000, 0x0000, W, 1, 0, "DL",     "u;a",         ""),
    DataKind.VECTOR:   _op(0x0000, 0x0000, W, 1, 0, "DL",     "u;T #v",      ""),
    DataKind.RATIONAL: _op(0x0000, 0x0000, W, 1, 0, "DR",     "q;f",         ""),
}
# fmt: on


def data_definition(kind: DataKind) -> InstructionDefinition:
    """Return the pseudo definition used to render literal data of ``kind``."""

    try:
        return DATA_CATALOG[DataKind(kind)]
    except ValueError:
        raise ValueError(f"Unknown data kind: {kind!r}") from None


__all__ = [
    "BASE_CATALOG",
    "CATCH_ALL_CATALOG",
    "Catalog",
    "DATA_CATALOG",
    "DMOV_CATALOG",
    "DataKind",
    "SHIFT_CATALOG",
    "SPECIALS_CATALOG",
    "STACK_CATALOG",
    "data_definition",
]
