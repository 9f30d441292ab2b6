"""
NESPAK - Run-Length Compression for 8-bit Data
"""

__version__ = "1.1.0"

from .tokens import RLE_MAX_RUN_SIZE, RLE_UNIQUE_RUN_START, Run, Literal
from .rle import RleEncoder, RleDecoder, pack, unpack
from .codec import Algorithm, Codec, RleCodec, get_codec
from .errors import NespakError, MalformedStreamError, UnsupportedAlgorithmError

__all__ = [
    "RLE_MAX_RUN_SIZE",
    "RLE_UNIQUE_RUN_START",
    "Run",
    "Literal",
    "RleEncoder",
    "RleDecoder",
    "pack",
    "unpack",
    "Algorithm",
    "Codec",
    "RleCodec",
    "get_codec",
    "NespakError",
    "MalformedStreamError",
    "UnsupportedAlgorithmError",
]
