"""Exceptions raised while encoding a QR symbol."""

from __future__ import annotations


class QRCodeError(ValueError):
    """Base class for every encode failure."""


class IncompatibleEncodingError(QRCodeError):
    def __init__(self, text: str, encoding: str):
        super().__init__(f"text cannot be encoded with {encoding!r}")
        self.text = text
        self.encoding = encoding


class NoVersionFitsError(QRCodeError):
    def __init__(self, length: int, level: object):
        super().__init__(f"{length} bytes do not fit in any version at level {level}")
        self.length = length
        self.level = level


class DataLengthUndeterminableError(QRCodeError):
    def __init__(self, mode: object, version: int):
        super().__init__(f"no character count width for mode {mode} in version {version}")
        self.mode = mode
        self.version = version


class DataExceedsCapacityError(QRCodeError):
    def __init__(self, bit_count: int, capacity: int):
        super().__init__(f"data is {bit_count} bits, capacity is {capacity} bits")
        self.bit_count = bit_count
        self.capacity = capacity
