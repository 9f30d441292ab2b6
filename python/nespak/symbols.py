"""
NESPAK Symbol Helpers

Conversions between raw bytes and the fixed-width symbol formats used
around the codec: zero-padded bit strings and one-decimal-per-line text.
"""

from typing import Iterable, List, Union

# Symbol width in bits
BYTE = 8

SymbolData = Union[bytes, bytearray, memoryview, Iterable[int]]


def coerce_symbols(data: SymbolData) -> bytes:
    """
    Normalize input symbols to bytes.

    Args:
        data: bytes-like object or iterable of ints

    Returns:
        The symbols as bytes

    Raises:
        ValueError: If a value is outside 0..255
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)

    result = bytearray()
    for index, value in enumerate(data):
        if not isinstance(value, int) or not 0 <= value <= 0xFF:
            raise ValueError(f"Symbol {index} is not a byte value: {value!r}")
        result.append(value)
    return bytes(result)


def to_binary(value: int, width: int = BYTE) -> str:
    """
    Format an integer as a zero-padded bit string.

    Args:
        value: Non-negative integer
        width: Number of bits

    Returns:
        String of '0'/'1' characters, exactly `width` long
    """
    if value < 0:
        raise ValueError(f"to_binary requires non-negative value, got {value}")
    if value >> width:
        raise ValueError(f"Value {value} does not fit in {width} bits")
    return format(value, f'0{width}b')


def from_binary(bits: str) -> int:
    """Parse a bit string to an integer."""
    if not bits or bits.strip('01'):
        raise ValueError(f"Not a bit string: {bits!r}")
    return int(bits, 2)


def symbols_to_bits(data: SymbolData, width: int = BYTE) -> str:
    """Render symbols as one concatenated bit string."""
    return ''.join(to_binary(value, width) for value in coerce_symbols(data))


def bits_to_symbols(text: str, width: int = BYTE) -> List[int]:
    """
    Split a concatenated bit string into fixed-width symbols.

    Args:
        text: '0'/'1' characters; whitespace is ignored
        width: Bits per symbol

    Returns:
        List of symbol values

    Raises:
        ValueError: If the text is not a whole number of symbols
    """
    bits = ''.join(text.split())
    if len(bits) % width:
        raise ValueError(f"Bit string length {len(bits)} is not a multiple of {width}")
    return [from_binary(bits[i:i + width]) for i in range(0, len(bits), width)]


def parse_decimal_lines(text: str) -> bytes:
    """
    Parse one decimal byte value per line.

    Blank lines are skipped.
    """
    values = []
    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        try:
            value = int(line)
        except ValueError:
            raise ValueError(f"Line {lineno}: not a decimal value: {line!r}") from None
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Line {lineno}: value {value} out of byte range")
        values.append(value)
    return bytes(values)


def format_decimal_lines(data: SymbolData) -> str:
    """Render symbols as one decimal value per line."""
    return ''.join(f'{value}\n' for value in coerce_symbols(data))
