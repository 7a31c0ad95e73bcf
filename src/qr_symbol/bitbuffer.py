"""Append-only bit sequence used to assemble the data codewords."""

from __future__ import annotations

from typing import List


class BitBuffer:
    def __init__(self) -> None:
        self.bits: List[int] = []

    def __len__(self) -> int:
        return len(self.bits)

    @property
    def bit_count(self) -> int:
        return len(self.bits)

    def put(self, value: int, length: int) -> None:
        """Append the low ``length`` bits of ``value``, most significant first."""
        for i in reversed(range(length)):
            self.bits.append((value >> i) & 1)

    def put_bit(self, bit: bool) -> None:
        self.bits.append(1 if bit else 0)

    def get_byte(self, index: int) -> int:
        chunk = 0
        for bit in self.bits[index * 8:index * 8 + 8]:
            chunk = (chunk << 1) | bit
        # a partial last byte is padded with zero bits on the right
        tail = len(self.bits[index * 8:index * 8 + 8])
        return chunk << (8 - tail)

    def to_bytes(self) -> List[int]:
        return [self.get_byte(i) for i in range((len(self.bits) + 7) // 8)]
