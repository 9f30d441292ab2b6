"""Tests for token records and the stream parser."""

import pytest

from nespak.errors import MalformedStreamError
from nespak.tokens import (
    RLE_MAX_RUN_SIZE,
    Literal,
    Run,
    is_literal_marker,
    parse_tokens,
    serialize_tokens,
)


def test_run_serialize():
    assert Run(5, 0x41).serialize() == b'\x05A'
    assert Run(5, 0x41).expand() == b'AAAAA'


def test_run_rejects_marker_length():
    with pytest.raises(ValueError):
        Run(RLE_MAX_RUN_SIZE + 1, 0x41)


def test_run_rejects_wide_symbol():
    with pytest.raises(ValueError):
        Run(1, 0x100)


def test_literal_serialize():
    assert Literal(b'AF').serialize() == b'\xff\x02AF'


def test_literal_size_limits():
    with pytest.raises(ValueError):
        Literal(b'')
    with pytest.raises(ValueError):
        Literal(b'x' * 256)
    assert len(Literal(b'x' * 255).serialize()) == 257


def test_marker():
    assert is_literal_marker(0xFF)
    assert not is_literal_marker(0xFE)


def test_parse_tokens():
    data = b'\x05A\x04F\xff\x02AF'
    tokens = list(parse_tokens(data))
    assert tokens == [Run(5, 0x41), Run(4, 0x46), Literal(b'AF')]
    assert serialize_tokens(tokens) == data


def test_parse_empty_literal():
    with pytest.raises(MalformedStreamError):
        list(parse_tokens(b'\xff\x00'))
    assert list(parse_tokens(b'\xff\x00\x01A', strict=False)) == [Run(1, 0x41)]


def test_parse_truncated_lenient():
    assert list(parse_tokens(b'\x01A\xff\x03B', strict=False)) == [Run(1, 0x41), Literal(b'B')]
    assert list(parse_tokens(b'\x01A\xff', strict=False)) == [Run(1, 0x41)]
