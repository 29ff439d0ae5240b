import struct

import pytest

from fr80.config import OutputOption
from fr80.decoding.coding import BufferTooShort, Decoder, FetchDecoder
from fr80.decoding.decode_map import DecodeTable
from fr80.decoding.reader import fetch_instruction


@pytest.fixture(scope="module")
def table() -> DecodeTable:
    return DecodeTable.build()


def _words(*words: int) -> bytes:
    return struct.pack(f">{len(words)}H", *words)


def test_fetch_plain_instruction(table: DecodeTable) -> None:
    decoder = Decoder(_words(0xA625), base=0x1000)
    fetched = fetch_instruction(decoder, table)
    assert fetched.address == 0x1000
    assert fetched.definition.name == "ADD"
    assert fetched.length == 2
    assert fetched.fields.ri == 5
    assert fetched.fields.rj == 2


def test_fetch_ldi32_reads_two_x_words(table: DecodeTable) -> None:
    decoder = Decoder(_words(0x9F83, 0x1234, 0x5678, 0x9FA0))
    fetched = fetch_instruction(decoder, table)
    assert fetched.definition.name == "LDI:32"
    assert fetched.x_words == (0x1234, 0x5678)
    assert fetched.x_value == 0x12345678
    assert fetched.length == 6
    assert fetched.fields.ri == 3
    nop = fetch_instruction(decoder, table)
    assert nop.definition.name == "NOP"
    assert nop.address == 6


def test_fetch_coprocessor_reads_y_word(table: DecodeTable) -> None:
    decoder = Decoder(_words(0x9FC1, 0x0A23))
    fetched = fetch_instruction(decoder, table)
    assert fetched.definition.name == "COPOP"
    assert fetched.x_words == ()
    assert fetched.y_words == (0x0A23,)
    assert fetched.y_value == 0x0A23


def test_fetch_truncated_stream(table: DecodeTable) -> None:
    decoder = Decoder(_words(0x9B00))
    with pytest.raises(BufferTooShort):
        fetch_instruction(decoder, table)


def test_fetch_uses_table_options() -> None:
    memory = _words(0x1705)
    decoder = FetchDecoder(lambda addr: memory[addr])
    fetched = fetch_instruction(decoder, DecodeTable.build(OutputOption.STACK))
    assert fetched.definition.name == "PUSH"
