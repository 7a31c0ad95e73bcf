"""Polynomial arithmetic over GF(256) for Reed-Solomon error correction.

The field is generated by x^8 + x^4 + x^3 + x^2 + 1 with alpha = 2, the
field used by every QR symbol. Coefficients are kept highest degree first.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Iterator, List, Sequence, Tuple

PRIMITIVE = 0x11D


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    exp = [0] * 256
    log = [0] * 256
    value = 1
    for i in range(255):
        exp[i] = value
        log[value] = i
        value <<= 1
        if value & 0x100:
            value ^= PRIMITIVE
    # alpha^255 == alpha^0
    exp[255] = exp[0]
    return tuple(exp), tuple(log)


EXP_TABLE, LOG_TABLE = _build_tables()


def gexp(n: int) -> int:
    return EXP_TABLE[n % 255]


def glog(n: int) -> int:
    if n < 1:
        raise ValueError(f"glog({n}) is undefined")
    return LOG_TABLE[n]


def gf_multiply(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return EXP_TABLE[(LOG_TABLE[a] + LOG_TABLE[b]) % 255]


class Polynomial:
    """Immutable polynomial with GF(256) coefficients."""

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: Iterable[int], shift: int = 0):
        coefficients = list(coefficients)
        if not coefficients:
            raise ValueError("a polynomial needs at least one coefficient")
        offset = 0
        while offset < len(coefficients) - 1 and coefficients[offset] == 0:
            offset += 1
        self._coefficients: Tuple[int, ...] = tuple(coefficients[offset:]) + (0,) * shift

    def __len__(self) -> int:
        return len(self._coefficients)

    def __getitem__(self, index: int) -> int:
        return self._coefficients[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._coefficients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coefficients)})"

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        result = [0] * (len(self) + len(other) - 1)
        for i, a in enumerate(self):
            for j, b in enumerate(other):
                result[i + j] ^= gf_multiply(a, b)
        return Polynomial(result)

    def __mod__(self, divisor: "Polynomial") -> "Polynomial":
        remainder: List[int] = list(self)
        while len(remainder) >= len(divisor):
            lead = remainder[0]
            if lead:
                ratio = glog(lead) - glog(divisor[0])
                for i, coefficient in enumerate(divisor):
                    remainder[i] ^= gf_multiply(coefficient, gexp(ratio))
            # the leading term is always cancelled, together with any zeros after it
            remainder = list(Polynomial(remainder[1:])) if len(remainder) > 1 else [0]
            if len(remainder) == 1 and remainder[0] == 0:
                break
        return Polynomial(remainder)


@lru_cache(maxsize=None)
def error_correct_polynomial(ec_count: int) -> Polynomial:
    """Return the Reed-Solomon generator of degree ``ec_count``."""
    if ec_count < 1:
        raise ValueError("ec_count must be positive")
    poly = Polynomial([1])
    for i in range(ec_count):
        poly = poly * Polynomial([1, gexp(i)])
    return poly


def remainder_coefficients(poly: Polynomial, count: int) -> List[int]:
    """Return the low-order ``count`` coefficients of ``poly``, zero padded."""
    coefficients: Sequence[int] = list(poly)
    offset = len(coefficients) - count
    return [coefficients[i + offset] if i + offset >= 0 else 0 for i in range(count)]
