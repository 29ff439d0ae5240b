# based on https://github.com/whitequark/binja-avnera/blob/main/mc/coding.py
"""Big-endian word access over a buffer or a memory read callback."""

import struct
from typing import Callable

# FR code addresses are 32-bit.
ADDRESS_SPACE_SIZE = 0x100000000


class BufferTooShort(Exception):
    """Raised when attempting to read past the end of the buffer."""


class Decoder:
    def __init__(self, buf: bytes, base: int = 0) -> None:
        self.buf, self.pos, self.base = buf, 0, base

    def get_pos(self) -> int:
        return self.pos

    def get_addr(self) -> int:
        return self.base + self.pos

    def peek_word(self, offset: int = 0) -> int:
        start = self.pos + offset * 2
        if len(self.buf) - start < 2:
            raise BufferTooShort
        return struct.unpack_from(">H", self.buf, start)[0]

    def _unpack(self, fmt: str) -> int:
        size = struct.calcsize(fmt)
        if len(self.buf) - self.pos < size:
            raise BufferTooShort
        fmt = ">" + fmt if fmt[0] not in "<>" else fmt
        items = struct.unpack_from(fmt, self.buf, self.pos)
        self.pos += size
        if len(items) == 1:
            return items[0]  # type: ignore
        raise ValueError("Unpacking more than one item is not supported")

    def unsigned_word(self) -> int:
        return self._unpack("H")


class FetchDecoder(Decoder):
    """Decoder that fetches bytes using a callable instead of a buffer."""

    def __init__(self, read_mem: Callable[[int], int], start: int = 0) -> None:
        self.read_mem = read_mem
        self.base = 0
        self.pos = start

    def peek_word(self, offset: int = 0) -> int:
        addr = self.pos + offset * 2
        if addr + 2 > ADDRESS_SPACE_SIZE:
            raise BufferTooShort
        return (self.read_mem(addr) << 8) | self.read_mem(addr + 1)

    def _unpack(self, fmt: str) -> int:
        size = struct.calcsize(fmt)
        if self.pos + size > ADDRESS_SPACE_SIZE:
            raise BufferTooShort
        fmt = ">" + fmt if fmt[0] not in "<>" else fmt
        items = struct.unpack_from(
            fmt, bytearray(self.read_mem(self.pos + i) for i in range(size))
        )
        self.pos += size
        if len(items) == 1:
            return items[0]  # type: ignore
        raise ValueError("Unpacking more than one item is not supported")

