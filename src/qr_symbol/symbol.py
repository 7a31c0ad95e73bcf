"""The QR symbol facade: version selection, codewords, mask choice."""

from __future__ import annotations

import codecs
import logging
from typing import List, Optional, Tuple, Union

from .codewords import create_data
from .errors import IncompatibleEncodingError, NoVersionFitsError
from .grid import ModuleGrid, build_grid
from .masks import best_mask_pattern
from .tables import MAX_VERSION, MIN_VERSION, ErrorCorrectLevel, alignment_positions, byte_capacity

logger = logging.getLogger(__name__)


def choose_version(length: int, level: ErrorCorrectLevel) -> int:
    """Return the smallest version whose byte-mode capacity holds ``length`` bytes."""
    for version in range(MIN_VERSION, MAX_VERSION + 1):
        if length <= byte_capacity(version, level):
            return version
    raise NoVersionFitsError(length, level)


class QRSymbol:
    """A finished, read-only QR symbol."""

    def __init__(
        self,
        version: int,
        level: ErrorCorrectLevel,
        codewords: Tuple[int, ...],
        mask_pattern: int,
        grid: ModuleGrid,
    ):
        self.version = version
        self.error_correct_level = level
        self.codewords = codewords
        self.mask_pattern = mask_pattern
        self._grid = grid

    @classmethod
    def encode(
        cls,
        payload: Union[bytes, bytearray],
        level: ErrorCorrectLevel = ErrorCorrectLevel.M,
        *,
        version: Optional[int] = None,
        mask_pattern: Optional[int] = None,
    ) -> "QRSymbol":
        if not isinstance(payload, (bytes, bytearray)):
            raise TypeError("payload must be bytes; use encode_text for str")
        if version is None:
            version = choose_version(len(payload), level)
            logger.debug("selected version %d for %d bytes at level %s", version, len(payload), level)
        elif not MIN_VERSION <= version <= MAX_VERSION:
            raise ValueError(f"version out of range: {version}")
        codewords = tuple(create_data(version, level, bytes(payload)))
        if mask_pattern is None:
            mask_pattern, grid = best_mask_pattern(version, level, codewords)
        else:
            grid = build_grid(version, level, codewords, mask_pattern)
        logger.debug("encoded version %d level %s with mask %d", version, level, mask_pattern)
        return cls(version, level, codewords, mask_pattern, grid)

    @classmethod
    def encode_text(
        cls,
        text: str,
        level: ErrorCorrectLevel = ErrorCorrectLevel.M,
        encoding: str = "utf-8",
        **kwargs,
    ) -> "QRSymbol":
        try:
            codecs.lookup(encoding)
            payload = text.encode(encoding)
        except (LookupError, UnicodeEncodeError) as exc:
            raise IncompatibleEncodingError(text, encoding) from exc
        return cls.encode(payload, level, **kwargs)

    @property
    def module_count(self) -> int:
        return self._grid.module_count

    @property
    def alignment_positions(self) -> Tuple[int, ...]:
        return alignment_positions(self.version)

    def is_dark(self, row: int, col: int) -> bool:
        return self._grid.is_dark(row, col)

    def is_light(self, row: int, col: int) -> bool:
        return self._grid.is_light(row, col)

    def is_complete(self) -> bool:
        return self._grid.is_complete()

    def get_matrix(self) -> List[List[bool]]:
        return self._grid.to_matrix()

    def __repr__(self) -> str:
        return (
            f"QRSymbol(version={self.version}, level={self.error_correct_level}, "
            f"mask_pattern={self.mask_pattern})"
        )
