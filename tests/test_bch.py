import pytest

from qr_symbol.bch import G15_MASK, decode_format_info, format_info_bits, version_info_bits
from qr_symbol.tables import ErrorCorrectLevel


@pytest.mark.parametrize(
    "level,mask,expected",
    [
        (ErrorCorrectLevel.L, 0, 0b111011111000100),
        (ErrorCorrectLevel.L, 4, 0b110011000101111),
        (ErrorCorrectLevel.M, 0, 0b101010000010010),
        (ErrorCorrectLevel.Q, 0, 0b011010101011111),
        (ErrorCorrectLevel.H, 0, 0b001011010001001),
    ],
)
def test_format_info_known_words(level, mask, expected):
    assert format_info_bits(level, mask) == expected


def test_format_info_mask_out_of_range():
    with pytest.raises(ValueError):
        format_info_bits(ErrorCorrectLevel.L, 8)


def test_version_info_known_words():
    assert version_info_bits(7) == 0b000111110010010100
    assert version_info_bits(8) == 0b001000010110111100
    assert version_info_bits(40) == 0b101000110001101001


def test_version_info_only_for_large_versions():
    with pytest.raises(ValueError):
        version_info_bits(6)


def test_decode_format_info_inverts_encoding():
    assert decode_format_info(0b110011000101111) == (ErrorCorrectLevel.L, 4)
    assert decode_format_info(G15_MASK) == (ErrorCorrectLevel.M, 0)


def test_decode_format_info_rejects_damage():
    with pytest.raises(ValueError):
        decode_format_info(0b110011000101111 ^ 0b100)
