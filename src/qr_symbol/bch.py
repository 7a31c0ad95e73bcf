"""BCH-protected format and version information.

These are plain GF(2) bit-polynomial divisions, unrelated to the GF(256)
arithmetic of :mod:`qr_symbol.polynomial`.
"""

from __future__ import annotations

from typing import Tuple

from .tables import MAX_VERSION, ErrorCorrectLevel

G15 = 0b10100110111
G18 = 0b1111100100101
G15_MASK = 0b101010000010010


def bch_digit(data: int) -> int:
    return data.bit_length()


def _bch_remainder(data: int, generator: int) -> int:
    d = data
    while bch_digit(d) - bch_digit(generator) >= 0:
        d ^= generator << (bch_digit(d) - bch_digit(generator))
    return d


def format_info_bits(level: ErrorCorrectLevel, mask_pattern: int) -> int:
    if not 0 <= mask_pattern <= 7:
        raise ValueError(f"mask pattern out of range: {mask_pattern}")
    data = (level.pattern << 3) | mask_pattern
    return ((data << 10) | _bch_remainder(data << 10, G15)) ^ G15_MASK


def version_info_bits(version: int) -> int:
    if not 7 <= version <= MAX_VERSION:
        raise ValueError(f"version info only exists for versions 7-40, got {version}")
    return (version << 12) | _bch_remainder(version << 12, G18)


def decode_format_info(bits: int) -> Tuple[ErrorCorrectLevel, int]:
    """Invert :func:`format_info_bits` for an undamaged 15-bit word."""
    word = bits ^ G15_MASK
    if _bch_remainder(word, G15) != 0:
        raise ValueError(f"corrupted format information: {bits:015b}")
    data = word >> 10
    return ErrorCorrectLevel.from_pattern(data >> 3), data & 0b111
