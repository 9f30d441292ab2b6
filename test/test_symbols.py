"""Tests for symbol conversion helpers."""

import pytest

from nespak.symbols import (
    BYTE,
    bits_to_symbols,
    coerce_symbols,
    format_decimal_lines,
    from_binary,
    parse_decimal_lines,
    symbols_to_bits,
    to_binary,
)


def test_to_binary():
    assert to_binary(5) == '00000101'
    assert to_binary(255) == '11111111'
    assert to_binary(0x1234, 2 * BYTE) == '0001001000110100'


def test_to_binary_range():
    with pytest.raises(ValueError):
        to_binary(256)
    with pytest.raises(ValueError):
        to_binary(-1)


def test_from_binary():
    assert from_binary('11111111') == 255
    assert from_binary('00000101') == 5
    with pytest.raises(ValueError):
        from_binary('0012')
    with pytest.raises(ValueError):
        from_binary('')


def test_bit_strings():
    assert symbols_to_bits(b'\x05A') == '0000010101000001'
    assert bits_to_symbols('0000010101000001') == [5, 65]
    assert bits_to_symbols('00000101\n01000001\n') == [5, 65]
    with pytest.raises(ValueError):
        bits_to_symbols('0000010')


def test_decimal_lines():
    assert parse_decimal_lines('5\n65\n\n255\n') == bytes([5, 65, 255])
    assert format_decimal_lines(b'\x05A') == '5\n65\n'


def test_decimal_lines_errors():
    with pytest.raises(ValueError, match='Line 2'):
        parse_decimal_lines('1\n300\n')
    with pytest.raises(ValueError, match='not a decimal'):
        parse_decimal_lines('abc\n')


def test_coerce_symbols():
    assert coerce_symbols(bytearray(b'AB')) == b'AB'
    assert isinstance(coerce_symbols(bytearray(b'AB')), bytes)
    assert coerce_symbols(iter([1, 2])) == b'\x01\x02'
    with pytest.raises(ValueError):
        coerce_symbols([1, 'a'])
    with pytest.raises(ValueError):
        coerce_symbols([-1])
