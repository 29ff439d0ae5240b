"""
FR instruction decode table.

Catalogs of prefix-masked instruction definitions are expanded into a dense
65,536-slot table, with optional alias overlays layered on top of the base
catalog in a fixed order.
"""

from .catalogs import DataKind, data_definition  # noqa: F401
from .decode_map import (  # noqa: F401
    CatalogError,
    DecodeTable,
    build_decode_table,
    cached_decode_table,
)
from .opcode import (  # noqa: F401
    FlowType,
    InstructionDefinition,
    InstructionFormat,
    OperandFields,
)
from .reader import FetchedInstruction, fetch_instruction  # noqa: F401

__all__ = [
    "CatalogError",
    "DataKind",
    "DecodeTable",
    "FetchedInstruction",
    "FlowType",
    "InstructionDefinition",
    "InstructionFormat",
    "OperandFields",
    "build_decode_table",
    "cached_decode_table",
    "data_definition",
    "fetch_instruction",
]
