"""Fujitsu FR instruction decoding exports."""

from .config import OutputOption, parse_output_options
from .decoding import (
    DataKind,
    DecodeTable,
    FlowType,
    InstructionDefinition,
    InstructionFormat,
    build_decode_table,
    data_definition,
)

__all__ = [
    "DataKind",
    "DecodeTable",
    "FlowType",
    "InstructionDefinition",
    "InstructionFormat",
    "OutputOption",
    "build_decode_table",
    "data_definition",
    "parse_output_options",
]
