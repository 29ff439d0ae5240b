import pytest

from fr80.decoding.coding import (
    ADDRESS_SPACE_SIZE,
    BufferTooShort,
    Decoder,
    FetchDecoder,
)


def test_decoder() -> None:
    decoder = Decoder(bytes([0x97, 0x20, 0x9F, 0xA0]))
    assert decoder.peek_word() == 0x9720
    assert decoder.peek_word(1) == 0x9FA0
    assert decoder.unsigned_word() == 0x9720
    assert decoder.unsigned_word() == 0x9FA0
    assert decoder.get_pos() == 4


def test_decoder_tracks_base_address() -> None:
    decoder = Decoder(bytes(4), base=0x40000)
    decoder.unsigned_word()
    assert decoder.get_addr() == 0x40002


def test_decoder_errors() -> None:
    decoder = Decoder(bytes([0x11]))
    with pytest.raises(BufferTooShort):
        decoder.unsigned_word()
    with pytest.raises(BufferTooShort):
        decoder.peek_word()
    assert decoder.get_pos() == 0


def test_fetchdecoder() -> None:
    memory = bytes([0x9B, 0x01, 0x12, 0x34])

    def read_mem(addr: int) -> int:
        if addr < len(memory):
            return memory[addr]
        raise IndexError("Address out of bounds")

    decoder = FetchDecoder(read_mem)
    assert decoder.peek_word() == 0x9B01
    assert decoder.unsigned_word() == 0x9B01
    assert decoder.get_addr() == 2
    assert decoder.unsigned_word() == 0x1234


def test_fetchdecoder_bounds() -> None:
    decoder = FetchDecoder(lambda addr: 0xAB, start=ADDRESS_SPACE_SIZE - 2)
    assert decoder.peek_word() == 0xABAB
    with pytest.raises(BufferTooShort):
        decoder.peek_word(1)
    decoder.pos = ADDRESS_SPACE_SIZE - 1
    with pytest.raises(BufferTooShort):
        decoder.unsigned_word()


def test_fetchdecoder_read_error_propagation() -> None:
    def read_mem(addr: int) -> int:
        raise RuntimeError("read failed")

    decoder = FetchDecoder(read_mem)
    with pytest.raises(RuntimeError):
        decoder.unsigned_word()
