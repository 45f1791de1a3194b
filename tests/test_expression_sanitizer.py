'''
Expression sanitizer tests
'''

from expression_sanitizer import (InvalidExpression, normalize_glyphs,
                                  sanitize, strip_trailing_operators)

from pytest import mark, raises


@mark.parametrize('raw', ['', '   ', '\t'])
def test_blank_is_invalid(raw):
    with raises(InvalidExpression, match='vacía'):
        sanitize(raw)


@mark.parametrize('raw', ['+', '-.', '×÷', '−'])
def test_only_operators_is_invalid(raw):
    with raises(InvalidExpression, match='inválida'):
        sanitize(raw)


def test_invalid_expression_is_a_value_error():
    assert issubclass(InvalidExpression, ValueError)


@mark.parametrize('raw, expected', [
    ('2+3+', '2+3'),
    ('5*', '5'),
    ('12×', '12'),
    ('7^', '7'),
    ('3.', '3'),
    ('4+-*/^.', '4'),
])
def test_strips_trailing_operators(raw, expected):
    assert sanitize(raw) == expected


def test_keeps_closing_paren():
    assert sanitize('(2+3)') == '(2+3)'
    assert sanitize('(2+3)+') == '(2+3)'


def test_unmatched_paren_is_left_alone():
    assert sanitize('(4+1') == '(4+1'


def test_trailing_open_paren_is_not_stripped():
    assert sanitize('2×(') == '2*('


def test_normalizes_glyphs():
    assert normalize_glyphs('6×2÷3−1–4') == '6*2/3-1-4'


def test_ascii_untouched():
    assert sanitize('1-2*3/4^5') == '1-2*3/4^5'


def test_glyph_then_strip():
    assert sanitize('8÷2−') == '8/2'


def test_strip_stops_at_first_operand():
    assert strip_trailing_operators('1+2.5-') == '1+2.5'
    assert strip_trailing_operators('') == ''
