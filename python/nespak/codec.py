"""
NESPAK Codec Selection

Maps algorithm names to codec implementations. Only RLE is implemented;
LZ78 and Huffman are reserved names that raise UnsupportedAlgorithmError.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

from .errors import UnsupportedAlgorithmError
from .rle import RleDecoder, RleEncoder
from .symbols import SymbolData


class Algorithm(str, Enum):
    """Compression algorithms known to NESPAK."""
    RLE = 'rle'
    LZ78 = 'lz78'
    HUFF = 'huff'


class Codec(ABC):
    """Base class for a pack/unpack algorithm."""

    @property
    @abstractmethod
    def algorithm(self) -> Algorithm:
        pass

    @property
    def name(self) -> str:
        return self.algorithm.value

    @abstractmethod
    def pack(self, data: SymbolData) -> bytes:
        pass

    @abstractmethod
    def unpack(self, data: SymbolData) -> bytes:
        pass


class RleCodec(Codec):
    """Run-length codec with 0xFF literal blocks."""

    algorithm = Algorithm.RLE

    def __init__(self, emit_empty_run: bool = False, strict: bool = True):
        self._encoder = RleEncoder(emit_empty_run=emit_empty_run)
        self._decoder = RleDecoder(strict=strict)

    def pack(self, data: SymbolData) -> bytes:
        return self._encoder.encode(data)

    def unpack(self, data: SymbolData) -> bytes:
        return self._decoder.decode(data)


_CODECS = {
    Algorithm.RLE: RleCodec,
}


def get_codec(algorithm: Union[Algorithm, str] = Algorithm.RLE, **options) -> Codec:
    """
    Create a codec for an algorithm.

    Args:
        algorithm: Algorithm member or its name ('rle', 'lz78', 'huff')
        **options: Keyword arguments for the codec constructor

    Returns:
        Codec instance

    Raises:
        ValueError: If the name is unknown
        UnsupportedAlgorithmError: If the algorithm is not implemented
    """
    try:
        algorithm = Algorithm(algorithm)
    except ValueError:
        names = ', '.join(a.value for a in Algorithm)
        raise ValueError(f"Unknown algorithm {algorithm!r} (expected one of: {names})") from None

    codec_class = _CODECS.get(algorithm)
    if codec_class is None:
        raise UnsupportedAlgorithmError(f"Algorithm {algorithm.value!r} is not implemented")
    return codec_class(**options)
