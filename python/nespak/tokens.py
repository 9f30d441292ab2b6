"""
NESPAK Token Types and Wire Format

Defines the RLE wire constants and the two token records:
- RUN:     [length: 1..254][symbol]
- LITERAL: [0xFF][count: 1..255][symbol] x count

0xFF is reserved as the literal marker, so a run never has length 255.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from .errors import MalformedStreamError

# Format constants
RLE_MAX_RUN_SIZE = 254
RLE_UNIQUE_RUN_START = 0xFF
RLE_MAX_LITERAL_SIZE = 0xFF


@dataclass(frozen=True)
class Run:
    """
    A run of one repeated symbol.

    Attributes:
        length: Repeat count (0 only for the legacy terminal artifact)
        symbol: Byte value being repeated
    """
    length: int
    symbol: int

    def __post_init__(self):
        if not 0 <= self.length <= RLE_MAX_RUN_SIZE:
            raise ValueError(f"Run length must be 0..{RLE_MAX_RUN_SIZE}, got {self.length}")
        if not 0 <= self.symbol <= 0xFF:
            raise ValueError(f"Symbol must be 0..255, got {self.symbol}")

    def serialize(self) -> bytes:
        return bytes([self.length, self.symbol])

    def expand(self) -> bytes:
        return bytes([self.symbol]) * self.length


@dataclass(frozen=True)
class Literal:
    """
    A block of symbols stored verbatim.

    Attributes:
        symbols: The stored bytes (1..255 of them)
    """
    symbols: bytes

    def __post_init__(self):
        if not 1 <= len(self.symbols) <= RLE_MAX_LITERAL_SIZE:
            raise ValueError(
                f"Literal block must hold 1..{RLE_MAX_LITERAL_SIZE} symbols, got {len(self.symbols)}"
            )

    def serialize(self) -> bytes:
        return bytes([RLE_UNIQUE_RUN_START, len(self.symbols)]) + bytes(self.symbols)

    def expand(self) -> bytes:
        return bytes(self.symbols)


Token = Union[Run, Literal]


def is_literal_marker(byte: int) -> bool:
    """Check if byte starts a literal block."""
    return byte == RLE_UNIQUE_RUN_START


def serialize_tokens(tokens: Iterable[Token]) -> bytes:
    """
    Serialize tokens to the packed wire format.

    Args:
        tokens: Run and Literal records in stream order

    Returns:
        Packed bytes
    """
    return b''.join(token.serialize() for token in tokens)


def parse_tokens(data: bytes, strict: bool = True) -> Iterator[Token]:
    """
    Parse a packed stream into tokens.

    Args:
        data: Packed bytes
        strict: Raise on a stream that ends mid-token. When False, a
            truncated literal block yields the symbols that are present
            and any other dangling token is dropped.

    Yields:
        Run and Literal records in stream order

    Raises:
        MalformedStreamError: If strict and the stream is truncated
    """
    offset = 0
    size = len(data)

    while offset < size:
        start = offset
        marker = data[offset]
        offset += 1

        if is_literal_marker(marker):
            if offset >= size:
                if strict:
                    raise MalformedStreamError("Literal marker without a count", start)
                return
            count = data[offset]
            offset += 1
            if count == 0:
                if strict:
                    raise MalformedStreamError("Empty literal block", start)
                continue
            available = size - offset
            if count > available:
                if strict:
                    raise MalformedStreamError(
                        f"Literal block declares {count} symbols, only {available} remain", start
                    )
                if available:
                    yield Literal(bytes(data[offset:]))
                return
            yield Literal(bytes(data[offset:offset + count]))
            offset += count
        else:
            if offset >= size:
                if strict:
                    raise MalformedStreamError("Run length without a symbol", start)
                return
            yield Run(marker, data[offset])
            offset += 1
