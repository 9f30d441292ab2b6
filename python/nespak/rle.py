"""
NESPAK Run-Length Encoding

Unpacked : AAAAAFFFFAF
Packed   : 5-A 4-F 0xFF-2-AF
Wire     : 0x05 0x41 0x04 0x46 0xFF 0x02 0x41 0x46

Repeated symbols are stored as (length, symbol) pairs. Symbols with no
adjacent repeat are queued and stored verbatim behind the 0xFF marker.
"""

import logging
from enum import Enum
from typing import List, Optional

from .stats import CompressionStats
from .symbols import SymbolData, coerce_symbols
from .tokens import (
    RLE_MAX_LITERAL_SIZE,
    RLE_MAX_RUN_SIZE,
    Literal,
    Run,
    Token,
    parse_tokens,
    serialize_tokens,
)

logger = logging.getLogger(__name__)


class EncoderState(Enum):
    """Encoder scanning states."""
    SCANNING = 'scanning'                  # no pending literal symbols
    FLUSHING_LITERAL = 'flushing_literal'  # queue holds pending literal symbols


class RleEncoder:
    """
    RLE encoder.

    The encoder keeps a current `pattern`, the length of the run of it seen
    so far, and a queue of symbols that have not repeated yet. A symbol that
    matches the pattern while the queue is pending turns the last queued
    symbol into the first symbol of a new run; whatever was queued before it
    is written out as a literal block.

    Example:
        encoder = RleEncoder()
        packed = encoder.encode(b'AAAAAFFFFAF')
        # b'\\x05A\\x04F\\xff\\x02AF'
    """

    def __init__(self, emit_empty_run: bool = False):
        """
        Initialize encoder.

        Args:
            emit_empty_run: Write the trailing (0, pattern) run that older
                archives contain when input ends right after a maximum
                length run. Decoding is the same either way.
        """
        self.emit_empty_run = emit_empty_run
        self.reset()

    def reset(self) -> None:
        """Reset encoder state for new input."""
        self._tokens: List[Token] = []
        self._queue = bytearray()
        self._pattern: Optional[int] = None
        self._run_length = 0

    @property
    def state(self) -> EncoderState:
        if self._queue:
            return EncoderState.FLUSHING_LITERAL
        return EncoderState.SCANNING

    def feed(self, symbol: int) -> None:
        """
        Process one input symbol.

        Args:
            symbol: Byte value 0..255
        """
        if symbol == self._pattern:
            if self.state is EncoderState.FLUSHING_LITERAL:
                # last queued symbol equals the pattern and opens the run
                self._queue.pop()
                if self._queue:
                    self._emit_literal(self._queue)
                    self._queue.clear()
                self._run_length += 1

            self._run_length += 1

            if self._run_length == RLE_MAX_RUN_SIZE:
                self._tokens.append(Run(RLE_MAX_RUN_SIZE, self._pattern))
                self._run_length = 0
        else:
            if self._run_length > 0:
                self._tokens.append(Run(self._run_length, self._pattern))
                self._run_length = 0

            self._queue.append(symbol)
            self._pattern = symbol

    def finish(self) -> List[Token]:
        """
        Flush pending state at end of input and return all tokens.

        A pending queue is always written as a literal block, even a single
        symbol. Otherwise the final run is written.

        Returns:
            Tokens for everything fed since the last reset
        """
        if self.state is EncoderState.FLUSHING_LITERAL:
            self._emit_literal(self._queue)
        elif self._run_length > 0 or (self.emit_empty_run and self._pattern is not None):
            self._tokens.append(Run(self._run_length, self._pattern))

        tokens = self._tokens
        self.reset()
        return tokens

    def encode_tokens(self, data: SymbolData) -> List[Token]:
        """
        Encode symbols to a list of Run/Literal tokens.

        Args:
            data: bytes-like object or iterable of byte values

        Returns:
            Tokens in stream order
        """
        self.reset()
        for symbol in coerce_symbols(data):
            self.feed(symbol)
        return self.finish()

    def encode(self, data: SymbolData) -> bytes:
        """
        Encode symbols to packed bytes.

        Args:
            data: bytes-like object or iterable of byte values

        Returns:
            Packed stream
        """
        symbols = coerce_symbols(data)
        packed = serialize_tokens(self.encode_tokens(symbols))
        _log_status('pack', CompressionStats(len(symbols), len(packed)))
        return packed

    def _emit_literal(self, symbols: bytearray) -> None:
        for start in range(0, len(symbols), RLE_MAX_LITERAL_SIZE):
            self._tokens.append(Literal(bytes(symbols[start:start + RLE_MAX_LITERAL_SIZE])))


class RleDecoder:
    """RLE decoder."""

    def __init__(self, strict: bool = True):
        """
        Initialize decoder.

        Args:
            strict: Raise MalformedStreamError on truncated input instead
                of returning what could be decoded
        """
        self.strict = strict

    def decode(self, data: SymbolData) -> bytes:
        """
        Decode a packed stream.

        Args:
            data: Packed bytes

        Returns:
            The original symbols

        Raises:
            MalformedStreamError: If strict and the stream is truncated
        """
        packed = coerce_symbols(data)
        result = bytearray()
        for token in parse_tokens(packed, strict=self.strict):
            result.extend(token.expand())

        _log_status('unpack', CompressionStats(len(packed), len(result)))
        return bytes(result)


def pack(data: SymbolData, emit_empty_run: bool = False) -> bytes:
    """Pack symbols with RLE."""
    return RleEncoder(emit_empty_run=emit_empty_run).encode(data)


def unpack(data: SymbolData, strict: bool = True) -> bytes:
    """Unpack an RLE stream."""
    return RleDecoder(strict=strict).decode(data)


def _log_status(operation: str, stats: CompressionStats) -> None:
    logger.debug(
        "rle %s: before %d bytes, after %d bytes, compression %.2f%%",
        operation, stats.before, stats.after, stats.compression,
    )
