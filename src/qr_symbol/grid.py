"""Module grid construction: function patterns, metadata and data placement."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterator, List, Sequence, Tuple

from .bch import format_info_bits, version_info_bits
from .tables import ErrorCorrectLevel, alignment_positions

Coordinate = Tuple[int, int]


class Module(Enum):
    UNSET = None
    LIGHT = False
    DARK = True

    @classmethod
    def of(cls, dark: bool) -> "Module":
        return cls.DARK if dark else cls.LIGHT


MASK_PATTERNS: Tuple[Callable[[int, int], bool], ...] = (
    lambda i, j: (i + j) % 2 == 0,
    lambda i, j: i % 2 == 0,
    lambda i, j: j % 3 == 0,
    lambda i, j: (i + j) % 3 == 0,
    lambda i, j: (i // 2 + j // 3) % 2 == 0,
    lambda i, j: (i * j) % 2 + (i * j) % 3 == 0,
    lambda i, j: ((i * j) % 2 + (i * j) % 3) % 2 == 0,
    lambda i, j: ((i * j) % 3 + (i + j) % 2) % 2 == 0,
)


def mask_applies(mask_pattern: int, row: int, col: int) -> bool:
    if not 0 <= mask_pattern < len(MASK_PATTERNS):
        raise ValueError(f"mask pattern out of range: {mask_pattern}")
    return MASK_PATTERNS[mask_pattern](row, col)


class ModuleGrid:
    """Square matrix of tri-state modules with bounds-checked access."""

    def __init__(self, module_count: int):
        if module_count <= 0:
            raise ValueError("module_count must be positive")
        self.module_count = module_count
        self._modules: List[List[Module]] = [
            [Module.UNSET] * module_count for _ in range(module_count)
        ]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.module_count and 0 <= col < self.module_count):
            raise IndexError(f"module ({row}, {col}) outside a {self.module_count}x{self.module_count} grid")

    def __getitem__(self, position: Coordinate) -> Module:
        row, col = position
        self._check(row, col)
        return self._modules[row][col]

    def __setitem__(self, position: Coordinate, value: Module) -> None:
        row, col = position
        self._check(row, col)
        self._modules[row][col] = value

    def is_set(self, row: int, col: int) -> bool:
        return self[row, col] is not Module.UNSET

    def place(self, row: int, col: int, dark: bool) -> None:
        """Set an unset module; overwriting a placed one is a construction bug."""
        if self.is_set(row, col):
            raise RuntimeError(f"module ({row}, {col}) is already placed")
        self._modules[row][col] = Module.of(dark)

    def set_if_unset(self, row: int, col: int, dark: bool) -> bool:
        if self.is_set(row, col):
            return False
        self._modules[row][col] = Module.of(dark)
        return True

    def is_dark(self, row: int, col: int) -> bool:
        return self[row, col] is Module.DARK

    def is_light(self, row: int, col: int) -> bool:
        return not self.is_dark(row, col)

    def is_complete(self) -> bool:
        return all(module is not Module.UNSET for row in self._modules for module in row)

    def to_matrix(self) -> List[List[bool]]:
        return [[module is Module.DARK for module in row] for row in self._modules]


def placement_order(module_count: int) -> Iterator[Coordinate]:
    """Yield every position in the order codeword bits are laid down.

    Two-column strips are scanned from the right edge leftwards, skipping the
    vertical timing column, alternately upwards and downwards; within a row
    the right column of the strip comes first.
    """
    row = module_count - 1
    step = -1
    col = module_count - 1
    while col > 0:
        if col == 6:
            col -= 1
        while True:
            yield row, col
            yield row, col - 1
            row += step
            if row < 0 or row >= module_count:
                row -= step
                step = -step
                break
        col -= 2


def _setup_position_probe_pattern(grid: ModuleGrid, row: int, col: int) -> None:
    n = grid.module_count
    for r in range(-1, 8):
        if not 0 <= row + r < n:
            continue
        for c in range(-1, 8):
            if not 0 <= col + c < n:
                continue
            dark = (
                (0 <= r <= 6 and c in (0, 6))
                or (0 <= c <= 6 and r in (0, 6))
                or (2 <= r <= 4 and 2 <= c <= 4)
            )
            grid.place(row + r, col + c, dark)


def _setup_position_adjust_pattern(grid: ModuleGrid, version: int) -> None:
    positions = alignment_positions(version)
    for row in positions:
        for col in positions:
            if grid.is_set(row, col):
                continue
            for r in range(-2, 3):
                for c in range(-2, 3):
                    dark = r in (-2, 2) or c in (-2, 2) or (r == 0 and c == 0)
                    grid.place(row + r, col + c, dark)


def _setup_timing_pattern(grid: ModuleGrid) -> None:
    for i in range(8, grid.module_count - 8):
        grid.set_if_unset(i, 6, i % 2 == 0)
        grid.set_if_unset(6, i, i % 2 == 0)


def format_info_positions(module_count: int, index: int) -> Tuple[Coordinate, Coordinate]:
    """Return the two cells holding bit ``index`` (LSB = 0) of the format word."""
    n = module_count
    if index < 6:
        vertical = (index, 8)
    elif index < 8:
        vertical = (index + 1, 8)
    else:
        vertical = (n - 15 + index, 8)
    if index < 8:
        horizontal = (8, n - index - 1)
    elif index < 9:
        horizontal = (8, 15 - index)
    else:
        horizontal = (8, 14 - index)
    return vertical, horizontal


def _setup_type_info(grid: ModuleGrid, level: ErrorCorrectLevel, mask_pattern: int) -> None:
    n = grid.module_count
    bits = format_info_bits(level, mask_pattern)
    for i in range(15):
        module = Module.of(((bits >> i) & 1) == 1)
        for position in format_info_positions(n, i):
            grid[position] = module
    grid[n - 8, 8] = Module.DARK


def _setup_type_number(grid: ModuleGrid, version: int) -> None:
    n = grid.module_count
    bits = version_info_bits(version)
    for i in range(18):
        dark = ((bits >> i) & 1) == 1
        grid.place(i // 3, i % 3 + n - 11, dark)
        grid.place(i % 3 + n - 11, i // 3, dark)


def _map_data(grid: ModuleGrid, codewords: Sequence[int], mask_pattern: int) -> None:
    mask = MASK_PATTERNS[mask_pattern]
    bit_index = 0
    total_bits = len(codewords) * 8
    for row, col in placement_order(grid.module_count):
        if grid.is_set(row, col):
            continue
        dark = False
        if bit_index < total_bits:
            dark = ((codewords[bit_index // 8] >> (7 - bit_index % 8)) & 1) == 1
        if mask(row, col):
            dark = not dark
        grid[row, col] = Module.of(dark)
        bit_index += 1


def build_grid(
    version: int,
    level: ErrorCorrectLevel,
    codewords: Sequence[int],
    mask_pattern: int,
) -> ModuleGrid:
    """Build a finished grid for ``codewords`` with the given mask applied."""
    if not 0 <= mask_pattern < len(MASK_PATTERNS):
        raise ValueError(f"mask pattern out of range: {mask_pattern}")
    grid = ModuleGrid(version * 4 + 17)
    n = grid.module_count
    _setup_position_probe_pattern(grid, 0, 0)
    _setup_position_probe_pattern(grid, n - 7, 0)
    _setup_position_probe_pattern(grid, 0, n - 7)
    _setup_position_adjust_pattern(grid, version)
    _setup_timing_pattern(grid)
    _setup_type_info(grid, level, mask_pattern)
    if version >= 7:
        _setup_type_number(grid, version)
    _map_data(grid, codewords, mask_pattern)
    return grid
