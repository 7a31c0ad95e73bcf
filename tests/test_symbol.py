import pytest

from qr_symbol import (
    DataExceedsCapacityError,
    ErrorCorrectLevel,
    IncompatibleEncodingError,
    ModuleRole,
    NoVersionFitsError,
    QRCodeError,
    QRSymbol,
    module_roles,
)
from qr_symbol.bch import decode_format_info
from qr_symbol.matrix_utils import read_format_bits
from qr_symbol.symbol import choose_version
from qr_symbol.tables import byte_capacity


@pytest.mark.parametrize("version", range(1, 41))
def test_every_version_and_level_is_fully_built(version):
    for level in ErrorCorrectLevel:
        symbol = QRSymbol.encode(b"", level, version=version, mask_pattern=version % 8)
        assert symbol.module_count == version * 4 + 17
        assert symbol.is_complete()


def test_hello_world_picks_version_1():
    symbol = QRSymbol.encode(b"HELLO WORLD", ErrorCorrectLevel.L)
    assert symbol.version == 1
    assert symbol.module_count == 21
    assert len(symbol.codewords) == 26
    assert 0 <= symbol.mask_pattern <= 7


@pytest.mark.parametrize("level", list(ErrorCorrectLevel))
def test_capacity_boundary(level):
    capacity = byte_capacity(3, level)
    assert choose_version(capacity, level) == 3
    assert choose_version(capacity + 1, level) == 4
    assert QRSymbol.encode(b"a" * capacity, level, mask_pattern=0).version == 3


def test_largest_payload_and_overflow():
    assert choose_version(2953, ErrorCorrectLevel.L) == 40
    with pytest.raises(NoVersionFitsError) as excinfo:
        QRSymbol.encode(b"a" * 2954, ErrorCorrectLevel.L)
    assert excinfo.value.length == 2954
    assert isinstance(excinfo.value, QRCodeError)
    assert isinstance(excinfo.value, ValueError)


def test_forced_version_too_small():
    with pytest.raises(DataExceedsCapacityError):
        QRSymbol.encode(b"a" * 30, ErrorCorrectLevel.L, version=1)


def test_forced_version_out_of_range():
    with pytest.raises(ValueError):
        QRSymbol.encode(b"a", version=41)


def test_text_encoding_errors():
    with pytest.raises(IncompatibleEncodingError) as excinfo:
        QRSymbol.encode_text("日本語", encoding="ascii")
    assert excinfo.value.encoding == "ascii"
    with pytest.raises(IncompatibleEncodingError):
        QRSymbol.encode_text("abc", encoding="no-such-codec")


def test_encode_text_uses_requested_encoding():
    utf8 = QRSymbol.encode_text("é", ErrorCorrectLevel.L, mask_pattern=0)
    latin1 = QRSymbol.encode_text("é", ErrorCorrectLevel.L, encoding="latin-1", mask_pattern=0)
    assert utf8.codewords != latin1.codewords


def test_encode_rejects_str():
    with pytest.raises(TypeError):
        QRSymbol.encode("text")  # type: ignore[arg-type]


def test_queries_are_bounds_checked():
    symbol = QRSymbol.encode(b"x", ErrorCorrectLevel.M, mask_pattern=1)
    assert symbol.is_dark(0, 0)
    assert not symbol.is_light(0, 0)
    with pytest.raises(IndexError):
        symbol.is_dark(21, 0)


def test_get_matrix_is_a_copy():
    symbol = QRSymbol.encode(b"x", ErrorCorrectLevel.M, mask_pattern=1)
    matrix = symbol.get_matrix()
    matrix[0][0] = False
    assert symbol.is_dark(0, 0)


@pytest.mark.parametrize("level", list(ErrorCorrectLevel))
def test_format_info_reads_back(level):
    symbol = QRSymbol.encode(b"format info", level)
    expected = (level, symbol.mask_pattern)
    assert decode_format_info(read_format_bits(symbol)) == expected
    assert decode_format_info(read_format_bits(symbol, second_copy=True)) == expected


@pytest.mark.parametrize("version", [1, 7, 22])
def test_function_patterns_do_not_depend_on_mask(version):
    symbols = [
        QRSymbol.encode(b"patterns", ErrorCorrectLevel.M, version=version, mask_pattern=mask)
        for mask in range(8)
    ]
    roles = module_roles(symbols[0])
    fixed = {ModuleRole.DATA, ModuleRole.FORMAT}
    for row in range(symbols[0].module_count):
        for col in range(symbols[0].module_count):
            if roles[row][col] in fixed:
                continue
            values = {symbol.is_dark(row, col) for symbol in symbols}
            assert len(values) == 1, (row, col, roles[row][col])


def test_encoding_is_repeatable():
    first = QRSymbol.encode(b"same input", ErrorCorrectLevel.H)
    second = QRSymbol.encode(b"same input", ErrorCorrectLevel.H)
    assert first.mask_pattern == second.mask_pattern
    assert first.get_matrix() == second.get_matrix()
