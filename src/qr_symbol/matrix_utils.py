"""Read-only views over a finished symbol: module roles and format bits."""

from __future__ import annotations

from enum import Enum
from typing import List

from .grid import format_info_positions
from .symbol import QRSymbol


class ModuleRole(Enum):
    DATA = "data"
    FINDER_CENTER = "finder_center"
    FINDER = "finder"
    ALIGNMENT_CENTER = "alignment_center"
    ALIGNMENT = "alignment"
    TIMING = "timing"
    FORMAT = "format"
    VERSION = "version"


def _in_finder_area(size: int, row: int, col: int) -> bool:
    top = row <= 7
    bottom = row >= size - 8
    left = col <= 7
    right = col >= size - 8
    return (top and left) or (top and right) or (bottom and left)


def module_roles(symbol: QRSymbol) -> List[List[ModuleRole]]:
    """Classify every module of ``symbol`` by the pattern it belongs to.

    Finder entries include the light separator ring around each finder.
    Alignment patterns overlapping a finder are never drawn, so they are
    not reported either.
    """

    size = symbol.module_count
    roles = [[ModuleRole.DATA] * size for _ in range(size)]

    for i in range(8, size - 8):
        roles[i][6] = ModuleRole.TIMING
        roles[6][i] = ModuleRole.TIMING

    positions = symbol.alignment_positions
    for row in positions:
        for col in positions:
            if _in_finder_area(size, row, col):
                continue
            for r in range(-2, 3):
                for c in range(-2, 3):
                    roles[row + r][col + c] = ModuleRole.ALIGNMENT
            roles[row][col] = ModuleRole.ALIGNMENT_CENTER

    for center_row, center_col in ((3, 3), (3, size - 4), (size - 4, 3)):
        for r in range(-4, 5):
            for c in range(-4, 5):
                if 0 <= center_row + r < size and 0 <= center_col + c < size:
                    roles[center_row + r][center_col + c] = ModuleRole.FINDER
        roles[center_row][center_col] = ModuleRole.FINDER_CENTER

    for i in range(15):
        for row, col in format_info_positions(size, i):
            roles[row][col] = ModuleRole.FORMAT
    roles[size - 8][8] = ModuleRole.FORMAT

    if symbol.version >= 7:
        for i in range(size - 11, size - 8):
            for j in range(6):
                roles[i][j] = ModuleRole.VERSION
                roles[j][i] = ModuleRole.VERSION

    return roles


def read_format_bits(symbol: QRSymbol, second_copy: bool = False) -> int:
    """Read the 15-bit format word back out of ``symbol``.

    The first copy wraps the top-left finder; the second is split between
    the top-right and bottom-left finders.
    """

    bits = 0
    for i in range(15):
        vertical, horizontal = format_info_positions(symbol.module_count, i)
        near_top_left = vertical if i < 8 else horizontal
        other = horizontal if i < 8 else vertical
        row, col = other if second_copy else near_top_left
        if symbol.is_dark(row, col):
            bits |= 1 << i
    return bits
