'''
Result formatter tests
'''

import sys
from decimal import Decimal

from mpmath import mp

import config
from result_formatter import format_number

from pytest import mark


@mark.parametrize('value, expected', [
    (5.0, '5'),
    (0.30000000000000004, '0.3'),
    (0.1 + 0.2, '0.3'),
    (-2.5, '-2.5'),
    (1 / 3, '0.3333333333'),
    (2 / 3, '0.6666666667'),
    (12, '12'),
    (100.0, '100'),
])
def test_plain_decimal(value, expected):
    assert format_number(value) == expected


def test_half_up_rounding():
    assert format_number(Decimal('0.00000000005')) == '0.0000000001'
    assert format_number(Decimal('-0.00000000005')) == '-0.0000000001'
    assert format_number(Decimal('1.23456789044')) == '1.2345678904'


def test_no_scientific_notation():
    assert format_number(1e20) == '100000000000000000000'
    assert format_number(1e-7) == '0.0000001'


def test_tiny_values_round_to_zero():
    assert format_number(1e-12) == '0'
    assert format_number(-1e-12) == '0'
    assert format_number(-0.0) == '0'


@mark.parametrize('value', [
    float('inf'),
    float('-inf'),
    float('nan'),
    mp.inf,
    mp.nan,
    mp.mpc(1, 2),
    complex(0, 1),
])
def test_not_finite_real_is_error(value):
    assert format_number(value) == config.ERROR_MARKER


def test_beyond_double_range_is_error():
    assert format_number(mp.mpf(10) ** 400) == config.ERROR_MARKER
    assert format_number(10 ** 400) == config.ERROR_MARKER


def test_largest_double_is_formatted():
    text = format_number(sys.float_info.max)
    assert text.startswith('17976931348623157')
    assert '.' not in text


def test_mpf_values():
    with mp.workdps(40):
        third = mp.mpf(1) / 3
        sum_ = mp.mpf('0.1') + mp.mpf('0.2')
    assert format_number(third) == '0.3333333333'
    assert format_number(sum_) == '0.3'
    assert format_number(mp.mpf('5')) == '5'


def test_custom_fraction_digits():
    assert format_number(2 / 3, fraction_digits=2) == '0.67'
