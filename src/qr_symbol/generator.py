"""Boolean matrix helpers with a quiet-zone border."""

from __future__ import annotations

from typing import Dict, List, Optional

from .symbol import QRSymbol
from .tables import ErrorCorrectLevel


def matrix_from_text(
    text: str,
    ecc: str = "medium",
    border: int = 4,
    encoding: str = "utf-8",
    version: Optional[int] = None,
) -> List[List[bool]]:
    """Encode ``text`` into a matrix of booleans representing the QR code."""
    level = ErrorCorrectLevel.parse(ecc)
    symbol = QRSymbol.encode_text(text, level, encoding=encoding, version=version)
    return add_border(symbol.get_matrix(), border)


def matrix_from_bytes(
    data: bytes, ecc: str = "medium", border: int = 4, version: Optional[int] = None
) -> List[List[bool]]:
    level = ErrorCorrectLevel.parse(ecc)
    symbol = QRSymbol.encode(data, level, version=version)
    return add_border(symbol.get_matrix(), border)


def add_border(matrix: List[List[bool]], border: int) -> List[List[bool]]:
    if border < 0:
        raise ValueError("border must not be negative")
    if border == 0:
        return [row[:] for row in matrix]
    size = len(matrix)
    new_size = size + border * 2
    result = [[False] * new_size for _ in range(new_size)]
    for y, row in enumerate(matrix):
        for x, value in enumerate(row):
            result[y + border][x + border] = value
    return result


def symbol_to_dict(symbol: QRSymbol, border: int = 0) -> Dict[str, object]:
    """Return JSON-ready metadata and rows of "0"/"1" for ``symbol``."""
    matrix = add_border(symbol.get_matrix(), border)
    return {
        "version": symbol.version,
        "errorCorrection": symbol.error_correct_level.name,
        "maskPattern": symbol.mask_pattern,
        "moduleCount": symbol.module_count,
        "matrix": ["".join("1" if value else "0" for value in row) for row in matrix],
    }
