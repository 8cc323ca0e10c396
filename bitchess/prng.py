"""Xorshift64* pseudo-random numbers and fixed-width integer helpers."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1
_MULTIPLIER = 2685821657736338717


class PRNG:
    """Xorshift64* generator with a single 64-bit state word.

    A zero seed stays at zero forever, as with any xorshift generator.
    """

    __slots__ = ("state",)

    def __init__(self, seed: int) -> None:
        self.state = seed & _MASK64

    def rand(self) -> int:
        """Return the next 64-bit output."""
        s = self.state
        s ^= s >> 12
        s ^= (s << 25) & _MASK64
        s ^= s >> 27
        self.state = s
        return (s * _MULTIPLIER) & _MASK64

    def sparse_rand(self) -> int:
        """Return the AND of three outputs: a number with few bits set."""
        return self.rand() & self.rand() & self.rand()

    def __iter__(self):
        while True:
            yield self.rand()


def mul_hi64(a: int, b: int) -> int:
    """High 64 bits of the 128-bit product of two 64-bit values."""
    return ((a & _MASK64) * (b & _MASK64)) >> 64


def _read(data: bytes, offset: int, size: int, byteorder: str) -> int:
    if offset < 0 or offset + size > len(data):
        raise ValueError(
            f"need {size} bytes at offset {offset}, buffer holds {len(data)}"
        )
    return int.from_bytes(data[offset:offset + size], byteorder)


def read_le_u32(data: bytes, offset: int = 0) -> int:
    return _read(data, offset, 4, "little")


def read_le_u16(data: bytes, offset: int = 0) -> int:
    return _read(data, offset, 2, "little")


def read_be_u64(data: bytes, offset: int = 0) -> int:
    return _read(data, offset, 8, "big")


def read_be_u32(data: bytes, offset: int = 0) -> int:
    return _read(data, offset, 4, "big")


def read_be_u16(data: bytes, offset: int = 0) -> int:
    return _read(data, offset, 2, "big")