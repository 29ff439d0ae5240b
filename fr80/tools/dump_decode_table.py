#!/usr/bin/env python3
"""Emit the FR decode table as JSON.

Without ``--word`` the payload lists every applied definition and the runs of
consecutive words that decode to each one. With ``--word`` only the
definitions of the given instruction words are printed.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from fr80.config import format_output_options, load_decode_config, parse_output_options
from fr80.decoding.decode_map import DecodeTable
from fr80.decoding.opcode import InstructionDefinition

logger = logging.getLogger(__name__)


@dataclass
class DefinitionRecord:
    index: int
    name: str
    encoding: int
    mask: int
    format: str
    extra_words_x: int
    extra_words_y: int
    display_format: str
    action: str
    flow_type: str
    conditional: bool
    delay_slot: bool


@dataclass
class TableEnvelope:
    version: int
    options: str
    unknown_words: int
    definitions: List[DefinitionRecord]
    runs: List[List[int]]


def definition_record(index: int, definition: InstructionDefinition) -> DefinitionRecord:
    return DefinitionRecord(
        index=index,
        name=definition.name,
        encoding=definition.encoding,
        mask=definition.mask,
        format=definition.instruction_format.value,
        extra_words_x=definition.extra_word_count_x,
        extra_words_y=definition.extra_word_count_y,
        display_format=definition.display_format,
        action=definition.action,
        flow_type=definition.flow_type.name,
        conditional=definition.is_conditional,
        delay_slot=definition.has_delay_slot,
    )


def table_envelope(table: DecodeTable) -> TableEnvelope:
    index_of = {id(d): i for i, d in enumerate(table.definitions)}
    # Overlaid definitions no longer own any word; keep only reachable ones.
    runs = [[first, last, index_of[id(d)]] for first, last, d in table.runs()]
    reachable = sorted({run[2] for run in runs})
    return TableEnvelope(
        version=1,
        options=format_output_options(table.options),
        unknown_words=table.unknown_count(),
        definitions=[definition_record(i, table.definitions[i]) for i in reachable],
        runs=runs,
    )


def lookup_words(table: DecodeTable, words: Iterable[int]) -> List[Dict[str, Any]]:
    index_of = {id(d): i for i, d in enumerate(table.definitions)}
    out: List[Dict[str, Any]] = []
    for word in words:
        definition = table.decode(word)
        record = asdict(definition_record(index_of[id(definition)], definition))
        record["word"] = word
        record["fields"] = {
            key: value
            for key, value in asdict(definition.instruction_format.split(word)).items()
            if value is not None
        }
        out.append(record)
    return out


def emit_json(data: Any, pretty: bool) -> str:
    if pretty:
        return json.dumps(data, indent=2, sort_keys=True) + "\n"
    return json.dumps(data, separators=(",", ":"), sort_keys=True)


def _parse_word(raw: str) -> int:
    try:
        value = int(raw, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from None
    if not 0 <= value <= 0xFFFF:
        raise argparse.ArgumentTypeError(f"instruction word out of range: {raw}")
    return value


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--options",
        type=str,
        default=None,
        help=(
            "Comma-separated overlays (stack, shift, dmov, specials, all, none). "
            "Defaults to FR80_DECODE_OPTIONS / FR80_OPT_* from the environment."
        ),
    )
    parser.add_argument(
        "-w",
        "--word",
        type=_parse_word,
        action="append",
        help="Instruction word to look up (repeatable), e.g. 0x9720.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Path to write the JSON payload. Defaults to stdout.",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print the JSON output for human inspection.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser.parse_args(list(argv))


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.options is None:
            options = load_decode_config().options
        else:
            options = parse_output_options(args.options)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    table = DecodeTable.build(options)
    if args.word:
        data: Any = lookup_words(table, args.word)
    else:
        data = asdict(table_envelope(table))
    payload = emit_json(data, pretty=args.pretty)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(payload)
    else:
        sys.stdout.write(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
