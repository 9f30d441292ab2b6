#!/usr/bin/env python3
"""
NESPAK CLI Packer

Usage:
    nespak_pack.py input.bin output.rle
    nespak_pack.py --input-format decimal input.txt output.rle
    nespak_pack.py --packed-format bits --legacy input.txt output.rle
    nespak_pack.py --stream < input.bin > output.rle
    nespak_pack.py --stats input.bin output.rle
"""

import argparse
import logging
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from nespak import __version__, get_codec, Algorithm, NespakError
from nespak.stats import CompressionStats, print_report
from nespak.symbols import parse_decimal_lines, symbols_to_bits


def read_symbols(content: bytes, input_format: str) -> bytes:
    """Convert raw input content to symbols."""
    if input_format == 'decimal':
        return parse_decimal_lines(content.decode('ascii'))
    return content


def write_packed(packed: bytes, packed_format: str) -> bytes:
    """Convert a packed stream to output content."""
    if packed_format == 'bits':
        # one '0'/'1' character per bit, as v1.1 archives are stored
        return symbols_to_bits(packed).encode('ascii')
    return packed


def pack_file(input_path: str, output_path: str, algorithm: str = 'rle',
              input_format: str = 'raw', packed_format: str = 'raw',
              legacy: bool = False, show_stats: bool = False) -> None:
    """Pack a file with the selected algorithm."""

    with open(input_path, 'rb') as f:
        content = f.read()

    symbols = read_symbols(content, input_format)
    codec = get_codec(algorithm, emit_empty_run=legacy)
    packed = codec.pack(symbols)

    with open(output_path, 'wb') as f:
        f.write(write_packed(packed, packed_format))

    if show_stats:
        print_report(CompressionStats(len(symbols), len(packed)))


def pack_stream(algorithm: str = 'rle', input_format: str = 'raw',
                packed_format: str = 'raw', legacy: bool = False) -> None:
    """Pack stdin to stdout."""
    symbols = read_symbols(sys.stdin.buffer.read(), input_format)
    codec = get_codec(algorithm, emit_empty_run=legacy)
    sys.stdout.buffer.write(write_packed(codec.pack(symbols), packed_format))
    sys.stdout.buffer.flush()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Pack data with NESPAK',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nespak_pack.py level.bin level.rle
  nespak_pack.py --stats level.bin level.rle
  nespak_pack.py --input-format decimal tiles.txt tiles.rle
  nespak_pack.py --input-format decimal --packed-format bits --legacy tiles.txt tiles.rle
  cat level.bin | nespak_pack.py --stream > level.rle
"""
    )

    parser.add_argument('input', nargs='?', help='Input file')
    parser.add_argument('output', nargs='?', help='Output packed file')
    parser.add_argument('-a', '--algorithm', default=Algorithm.RLE.value,
                        choices=[a.value for a in Algorithm],
                        help='Compression algorithm (default: rle)')
    parser.add_argument('--input-format', default='raw', choices=['raw', 'decimal'],
                        help='raw bytes, or one decimal byte value per line')
    parser.add_argument('--packed-format', default='raw', choices=['raw', 'bits'],
                        help='raw bytes, or 8 ASCII bit characters per packed byte')
    parser.add_argument('--legacy', action='store_true',
                        help='Write the trailing zero-length run older archives contain')
    parser.add_argument('--stream', action='store_true',
                        help='Stream mode: read stdin, write packed data to stdout')
    parser.add_argument('--stats', action='store_true',
                        help='Show compression statistics')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('-v', '--version', action='version',
                        version=f'NESPAK v{__version__}')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        if args.stream:
            pack_stream(args.algorithm, args.input_format, args.packed_format, args.legacy)
        elif args.input and args.output:
            pack_file(args.input, args.output, args.algorithm, args.input_format,
                      args.packed_format, args.legacy, args.stats)
        else:
            parser.print_help()
            sys.exit(1)
    except (NespakError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
