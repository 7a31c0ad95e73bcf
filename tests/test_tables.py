import pytest
from qrcode.base import rs_blocks as reference_rs_blocks
from qrcode.util import MODE_8BIT_BYTE, length_in_bits, pattern_position

from qr_symbol.tables import (
    ErrorCorrectLevel,
    Mode,
    alignment_positions,
    byte_capacity,
    data_capacity_bits,
    length_bits,
    raw_data_modules,
    rs_blocks,
)


@pytest.mark.parametrize("version", range(1, 41))
def test_block_table_matches_reference(version):
    for level in ErrorCorrectLevel:
        ours = [(b.total_count, b.data_count) for b in rs_blocks(version, level)]
        theirs = [(b.total_count, b.data_count) for b in reference_rs_blocks(version, level.pattern)]
        assert ours == theirs


@pytest.mark.parametrize("version", range(1, 41))
def test_alignment_positions_match_reference(version):
    assert list(alignment_positions(version)) == list(pattern_position(version))


@pytest.mark.parametrize("version", range(1, 41))
def test_byte_length_bits_match_reference(version):
    assert length_bits(Mode.BYTE, version) == length_in_bits(MODE_8BIT_BYTE, version)


def test_length_bits_undefined_outside_versions():
    assert length_bits(Mode.BYTE, 0) is None
    assert length_bits(Mode.BYTE, 41) is None
    assert length_bits(Mode.NUMBER, 27) == 14


def test_known_capacities():
    assert raw_data_modules(1) == 208
    assert data_capacity_bits(1, ErrorCorrectLevel.L) == 152
    assert byte_capacity(1, ErrorCorrectLevel.L) == 17
    assert byte_capacity(1, ErrorCorrectLevel.H) == 7
    assert byte_capacity(10, ErrorCorrectLevel.L) == 271
    assert byte_capacity(40, ErrorCorrectLevel.L) == 2953
    assert byte_capacity(40, ErrorCorrectLevel.H) == 1273


def test_mixed_block_groups():
    blocks = rs_blocks(5, ErrorCorrectLevel.Q)
    assert [(b.total_count, b.data_count, b.ec_count) for b in blocks] == [
        (33, 15, 18), (33, 15, 18), (34, 16, 18), (34, 16, 18),
    ]


def test_version_out_of_range():
    with pytest.raises(ValueError):
        rs_blocks(41, ErrorCorrectLevel.L)
    with pytest.raises(ValueError):
        alignment_positions(0)


def test_level_patterns_and_names():
    assert [level.pattern for level in ErrorCorrectLevel] == [1, 0, 3, 2]
    assert ErrorCorrectLevel.from_pattern(3) is ErrorCorrectLevel.Q
    assert ErrorCorrectLevel.parse("High") is ErrorCorrectLevel.H
    assert ErrorCorrectLevel.parse("l") is ErrorCorrectLevel.L
    with pytest.raises(ValueError):
        ErrorCorrectLevel.parse("extreme")
