"""Mask selection by penalty ("lost point") scoring."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .grid import MASK_PATTERNS, ModuleGrid, build_grid
from .tables import ErrorCorrectLevel

logger = logging.getLogger(__name__)

Matrix = Sequence[Sequence[bool]]

_FINDER_LIKE = (True, False, True, True, True, False, True)


def adjacent_penalty(matrix: Matrix) -> int:
    size = len(matrix)
    score = 0
    for row in range(size):
        for col in range(size):
            dark = matrix[row][col]
            same = 0
            for r in range(max(row - 1, 0), min(row + 2, size)):
                for c in range(max(col - 1, 0), min(col + 2, size)):
                    if (r, c) != (row, col) and matrix[r][c] == dark:
                        same += 1
            if same > 5:
                score += 3 + same - 5
    return score


def block_penalty(matrix: Matrix) -> int:
    size = len(matrix)
    score = 0
    for row in range(size - 1):
        for col in range(size - 1):
            count = matrix[row][col] + matrix[row + 1][col] + matrix[row][col + 1] + matrix[row + 1][col + 1]
            if count in (0, 4):
                score += 3
    return score


def finder_penalty(matrix: Matrix) -> int:
    size = len(matrix)
    width = len(_FINDER_LIKE)
    score = 0
    for row in range(size):
        for col in range(size - width + 1):
            if all(matrix[row][col + k] == _FINDER_LIKE[k] for k in range(width)):
                score += 40
            if all(matrix[col + k][row] == _FINDER_LIKE[k] for k in range(width)):
                score += 40
    return score


def balance_penalty(matrix: Matrix) -> int:
    size = len(matrix)
    dark = sum(sum(1 for value in row if value) for row in matrix)
    return abs(100 * dark // size // size - 50) // 5 * 10


def lost_point(grid: ModuleGrid) -> int:
    matrix = grid.to_matrix()
    return (
        adjacent_penalty(matrix)
        + block_penalty(matrix)
        + finder_penalty(matrix)
        + balance_penalty(matrix)
    )


def best_mask_pattern(
    version: int, level: ErrorCorrectLevel, codewords: Sequence[int]
) -> Tuple[int, ModuleGrid]:
    """Return the lowest-penalty mask id and its grid; ties go to the lower id."""
    best: Tuple[int, ModuleGrid] | None = None
    best_score = 0
    scores: List[int] = []
    for mask in range(len(MASK_PATTERNS)):
        grid = build_grid(version, level, codewords, mask)
        score = lost_point(grid)
        scores.append(score)
        logger.debug("mask %d scored %d", mask, score)
        if best is None or score < best_score:
            best = (mask, grid)
            best_score = score
    assert best is not None
    logger.debug("chose mask %d from scores %s", best[0], scores)
    return best
