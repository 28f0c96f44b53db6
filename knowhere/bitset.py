"""Bit sets that mark filtered-out vector ids."""

from __future__ import annotations

import random


class Bitset:
    """Read-only view of ``num_bits`` bits packed little-endian into bytes."""

    def __init__(self, data: bytes = b"", num_bits: int = 0) -> None:
        data = bytes(data)
        if num_bits < 0:
            raise ValueError("num_bits must not be negative")
        if len(data) * 8 < num_bits:
            raise ValueError("data too short for the number of bits")
        self.data = data
        self.num_bits = num_bits

    def test(self, index: int) -> bool:
        """Return whether bit ``index`` is set."""
        if not 0 <= index < self.num_bits:
            raise IndexError(f"bit {index} out of range")
        return bool((self.data[index >> 3] >> (index & 7)) & 1)

    def is_empty(self) -> bool:
        """True when the set holds no bits at all."""
        return self.num_bits == 0

    def count(self) -> int:
        """Number of set bits."""
        return sum(self.test(i) for i in range(self.num_bits))

    def __len__(self) -> int:
        return self.num_bits


def gen_random_bitset(n: int, t: int, seed: int = 42) -> bytes:
    """Return ``n`` bits packed into bytes with ``t`` of them set at random positions."""
    if not 0 <= t <= n:
        raise ValueError("t must be between 0 and n")
    bits = [True] * t + [False] * (n - t)
    random.Random(seed).shuffle(bits)
    data = bytearray((n + 7) // 8)
    for i, bit in enumerate(bits):
        if bit:
            data[i >> 3] |= 1 << (i & 7)
    return bytes(data)