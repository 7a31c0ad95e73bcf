"""Standard QR tables: error correction levels, block layout, alignment positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import List, Optional, Tuple

MIN_VERSION = 1
MAX_VERSION = 40


class ErrorCorrectLevel(Enum):
    L = (0, 1)
    M = (1, 0)
    Q = (2, 3)
    H = (3, 2)

    def __init__(self, ordinal: int, pattern: int):
        self.ordinal = ordinal
        self.pattern = pattern

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_pattern(cls, pattern: int) -> "ErrorCorrectLevel":
        for level in cls:
            if level.pattern == pattern:
                return level
        raise ValueError(f"unknown error correction pattern: {pattern}")

    @classmethod
    def parse(cls, name: str) -> "ErrorCorrectLevel":
        try:
            return _LEVEL_NAMES[name.strip().lower()]
        except KeyError as exc:
            raise ValueError(f"unknown ECC level: {name}") from exc


_LEVEL_NAMES = {
    "l": ErrorCorrectLevel.L,
    "low": ErrorCorrectLevel.L,
    "m": ErrorCorrectLevel.M,
    "medium": ErrorCorrectLevel.M,
    "q": ErrorCorrectLevel.Q,
    "quartile": ErrorCorrectLevel.Q,
    "h": ErrorCorrectLevel.H,
    "high": ErrorCorrectLevel.H,
}


class Mode(Enum):
    NUMBER = 1
    ALPHA_NUM = 2
    BYTE = 4
    KANJI = 8


# character count field width for versions 1-9, 10-26 and 27-40
_LENGTH_BITS = {
    Mode.NUMBER: (10, 12, 14),
    Mode.ALPHA_NUM: (9, 11, 13),
    Mode.BYTE: (8, 16, 16),
    Mode.KANJI: (8, 10, 12),
}


def length_bits(mode: Mode, version: int) -> Optional[int]:
    widths = _LENGTH_BITS.get(mode)
    if widths is None or not (MIN_VERSION <= version <= MAX_VERSION):
        return None
    if version < 10:
        return widths[0]
    if version < 27:
        return widths[1]
    return widths[2]


@dataclass(frozen=True)
class BlockSpec:
    total_count: int
    data_count: int

    @property
    def ec_count(self) -> int:
        return self.total_count - self.data_count


# total error correction codewords per version, columns L, M, Q, H
_ECC_CODEWORDS = (
    (7, 10, 13, 17), (10, 16, 22, 28), (15, 26, 36, 44), (20, 36, 52, 64),
    (26, 48, 72, 88), (36, 64, 96, 112), (40, 72, 108, 130), (48, 88, 132, 156),
    (60, 110, 160, 192), (72, 130, 192, 224), (80, 150, 224, 264), (96, 176, 260, 308),
    (104, 198, 288, 352), (120, 216, 320, 384), (132, 240, 360, 432), (144, 280, 408, 480),
    (168, 308, 448, 532), (180, 338, 504, 588), (196, 364, 546, 650), (224, 416, 600, 700),
    (224, 442, 644, 750), (252, 476, 690, 816), (270, 504, 750, 900), (300, 560, 810, 960),
    (312, 588, 870, 1050), (336, 644, 952, 1110), (360, 700, 1020, 1200), (390, 728, 1050, 1260),
    (420, 784, 1140, 1350), (450, 812, 1200, 1440), (480, 868, 1290, 1530), (510, 924, 1350, 1620),
    (540, 980, 1440, 1710), (570, 1036, 1530, 1800), (570, 1064, 1590, 1890), (600, 1120, 1680, 1980),
    (630, 1204, 1770, 2100), (660, 1260, 1860, 2220), (720, 1316, 1950, 2310), (750, 1372, 2040, 2430),
)

_NUM_BLOCKS = (
    (1, 1, 1, 1), (1, 1, 1, 1), (1, 1, 2, 2), (1, 2, 2, 4), (1, 2, 4, 4),
    (2, 4, 4, 4), (2, 4, 6, 5), (2, 4, 6, 6), (2, 5, 8, 8), (4, 5, 8, 8),
    (4, 5, 8, 11), (4, 8, 10, 11), (4, 9, 12, 16), (4, 9, 16, 16), (6, 10, 12, 18),
    (6, 10, 17, 16), (6, 11, 16, 19), (6, 13, 18, 21), (7, 14, 21, 25), (8, 16, 20, 25),
    (8, 17, 23, 25), (9, 17, 23, 34), (9, 18, 25, 30), (10, 20, 27, 32), (12, 21, 29, 35),
    (12, 23, 34, 37), (12, 25, 34, 40), (13, 26, 35, 42), (14, 28, 38, 45), (15, 29, 40, 48),
    (16, 31, 43, 51), (17, 33, 45, 54), (18, 35, 48, 57), (19, 37, 51, 60), (19, 38, 53, 63),
    (20, 40, 56, 66), (21, 43, 59, 70), (22, 45, 62, 74), (24, 47, 65, 77), (25, 49, 68, 81),
)

_ALIGNMENT_POSITIONS: Tuple[Tuple[int, ...], ...] = (
    (),
    (6, 18),
    (6, 22),
    (6, 26),
    (6, 30),
    (6, 34),
    (6, 22, 38),
    (6, 24, 42),
    (6, 26, 46),
    (6, 28, 50),
    (6, 30, 54),
    (6, 32, 58),
    (6, 34, 62),
    (6, 26, 46, 66),
    (6, 26, 48, 70),
    (6, 26, 50, 74),
    (6, 30, 54, 78),
    (6, 30, 56, 82),
    (6, 30, 58, 86),
    (6, 34, 62, 90),
    (6, 28, 50, 72, 94),
    (6, 26, 50, 74, 98),
    (6, 30, 54, 78, 102),
    (6, 28, 54, 80, 106),
    (6, 32, 58, 84, 110),
    (6, 30, 58, 86, 114),
    (6, 34, 62, 90, 118),
    (6, 26, 50, 74, 98, 122),
    (6, 30, 54, 78, 102, 126),
    (6, 26, 52, 78, 104, 130),
    (6, 30, 56, 82, 108, 134),
    (6, 34, 60, 86, 112, 138),
    (6, 30, 58, 86, 114, 142),
    (6, 34, 62, 90, 118, 146),
    (6, 30, 54, 78, 102, 126, 150),
    (6, 24, 50, 76, 102, 128, 154),
    (6, 28, 54, 80, 106, 132, 158),
    (6, 32, 58, 84, 110, 136, 162),
    (6, 26, 54, 82, 110, 138, 166),
    (6, 30, 58, 86, 114, 142, 170),
)


def _check_version(version: int) -> None:
    if not (MIN_VERSION <= version <= MAX_VERSION):
        raise ValueError(f"version out of range: {version}")


def raw_data_modules(version: int) -> int:
    """Number of modules left for codewords once every function pattern is drawn."""
    _check_version(version)
    result = (16 * version + 128) * version + 64
    if version >= 2:
        num_align = version // 7 + 2
        result -= (25 * num_align - 10) * num_align - 55
        if version >= 7:
            result -= 36
    return result


@lru_cache(maxsize=None)
def _blocks(version: int, level: ErrorCorrectLevel) -> Tuple[BlockSpec, ...]:
    _check_version(version)
    total_codewords = raw_data_modules(version) // 8
    total_ecc = _ECC_CODEWORDS[version - 1][level.ordinal]
    num_blocks = _NUM_BLOCKS[version - 1][level.ordinal]
    ecc_per_block = total_ecc // num_blocks
    short_len = total_codewords // num_blocks
    num_long = total_codewords % num_blocks
    blocks = []
    for i in range(num_blocks):
        block_len = short_len + (1 if i >= num_blocks - num_long else 0)
        blocks.append(BlockSpec(block_len, block_len - ecc_per_block))
    return tuple(blocks)


def rs_blocks(version: int, level: ErrorCorrectLevel) -> List[BlockSpec]:
    return list(_blocks(version, level))


def data_capacity_bits(version: int, level: ErrorCorrectLevel) -> int:
    return 8 * sum(block.data_count for block in _blocks(version, level))


def byte_capacity(version: int, level: ErrorCorrectLevel) -> int:
    """Largest byte-mode payload that fits ``version`` at ``level``."""
    width = length_bits(Mode.BYTE, version)
    if width is None:
        return 0
    return (data_capacity_bits(version, level) - 4 - width) // 8


def alignment_positions(version: int) -> Tuple[int, ...]:
    _check_version(version)
    return _ALIGNMENT_POSITIONS[version - 1]
