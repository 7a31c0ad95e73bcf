import pytest

from qr_symbol.codewords import reed_solomon_remainder
from qr_symbol.polynomial import (
    EXP_TABLE,
    LOG_TABLE,
    Polynomial,
    error_correct_polynomial,
    gexp,
    gf_multiply,
    glog,
)


def test_tables_are_inverse():
    assert EXP_TABLE[0] == 1
    assert EXP_TABLE[8] == 29
    assert gexp(255) == 1
    for value in range(1, 256):
        assert gexp(glog(value)) == value
    assert sorted(EXP_TABLE[:255]) == list(range(1, 256))
    assert LOG_TABLE[2] == 1


def test_glog_of_zero_is_an_error():
    with pytest.raises(ValueError):
        glog(0)


def test_multiply_by_zero_and_overflow():
    assert gf_multiply(0, 77) == 0
    assert gf_multiply(77, 0) == 0
    assert gf_multiply(2, 128) == 29
    assert gf_multiply(1, 200) == 200


def test_leading_zeros_are_stripped_and_shift_appends():
    poly = Polynomial([0, 0, 3, 4], shift=2)
    assert list(poly) == [3, 4, 0, 0]
    assert poly.degree == 3
    assert list(Polynomial([0, 0])) == [0]


def test_generator_polynomial_degree_7():
    expected = [1] + [gexp(e) for e in (87, 229, 146, 149, 238, 102, 21)]
    assert list(error_correct_polynomial(7)) == expected


def test_modulo_small():
    # x^2 = 1 (mod x + 1)
    assert list(Polynomial([1, 0, 0]) % Polynomial([1, 1])) == [1]
    assert list(Polynomial([1, 2]) % Polynomial([1, 2, 3])) == [1, 2]


def test_product_then_modulo_leaves_nothing():
    divisor = error_correct_polynomial(5)
    product = Polynomial([12, 0, 99]) * divisor
    assert list(product % divisor) == [0]


def test_reed_solomon_hello_world_1m():
    data = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
    assert reed_solomon_remainder(data, 10) == [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


def test_reed_solomon_pads_short_remainder():
    assert reed_solomon_remainder([0, 0, 0], 4) == [0, 0, 0, 0]
