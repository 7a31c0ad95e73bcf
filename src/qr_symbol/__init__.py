"""Byte-mode QR symbol encoder."""

from .errors import (
    DataExceedsCapacityError,
    DataLengthUndeterminableError,
    IncompatibleEncodingError,
    NoVersionFitsError,
    QRCodeError,
)
from .generator import matrix_from_bytes, matrix_from_text
from .matrix_utils import ModuleRole, module_roles
from .symbol import QRSymbol
from .tables import ErrorCorrectLevel

__all__ = [
    "DataExceedsCapacityError",
    "DataLengthUndeterminableError",
    "ErrorCorrectLevel",
    "IncompatibleEncodingError",
    "ModuleRole",
    "NoVersionFitsError",
    "QRCodeError",
    "QRSymbol",
    "matrix_from_bytes",
    "matrix_from_text",
    "module_roles",
]
