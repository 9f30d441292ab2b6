#!/usr/bin/env python3
"""
NESPAK CLI Unpacker

Usage:
    nespak_unpack.py input.rle output.bin
    nespak_unpack.py --output-format decimal input.rle output.txt
    nespak_unpack.py --packed-format bits --output-format decimal input.rle output.txt
    nespak_unpack.py --stream < input.rle > output.bin
"""

import argparse
import logging
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from nespak import __version__, get_codec, Algorithm, NespakError
from nespak.stats import CompressionStats, print_report
from nespak.symbols import bits_to_symbols, format_decimal_lines


def read_packed(content: bytes, packed_format: str) -> bytes:
    """Convert input content to a packed stream."""
    if packed_format == 'bits':
        return bytes(bits_to_symbols(content.decode('ascii')))
    return content


def write_symbols(symbols: bytes, output_format: str) -> bytes:
    """Convert decoded symbols to output content."""
    if output_format == 'decimal':
        return format_decimal_lines(symbols).encode('ascii')
    return symbols


def unpack_file(input_path: str, output_path: str, algorithm: str = 'rle',
                packed_format: str = 'raw', output_format: str = 'raw',
                lenient: bool = False, show_stats: bool = False) -> None:
    """Unpack a file packed with the selected algorithm."""

    with open(input_path, 'rb') as f:
        packed = read_packed(f.read(), packed_format)

    codec = get_codec(algorithm, strict=not lenient)
    symbols = codec.unpack(packed)

    with open(output_path, 'wb') as f:
        f.write(write_symbols(symbols, output_format))

    if show_stats:
        print_report(CompressionStats(len(symbols), len(packed)))

    print(f"Unpacked {len(packed):,} bytes to {output_path}")


def unpack_stream(algorithm: str = 'rle', packed_format: str = 'raw',
                  output_format: str = 'raw', lenient: bool = False) -> None:
    """Unpack stdin to stdout."""
    packed = read_packed(sys.stdin.buffer.read(), packed_format)
    codec = get_codec(algorithm, strict=not lenient)
    sys.stdout.buffer.write(write_symbols(codec.unpack(packed), output_format))
    sys.stdout.buffer.flush()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Unpack NESPAK data',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nespak_unpack.py level.rle level.bin
  nespak_unpack.py --output-format decimal tiles.rle tiles.txt
  nespak_unpack.py --packed-format bits --output-format decimal tiles.rle tiles.txt
  cat level.rle | nespak_unpack.py --stream > level.bin
"""
    )

    parser.add_argument('input', nargs='?', help='Input packed file')
    parser.add_argument('output', nargs='?', help='Output file')
    parser.add_argument('-a', '--algorithm', default=Algorithm.RLE.value,
                        choices=[a.value for a in Algorithm],
                        help='Compression algorithm (default: rle)')
    parser.add_argument('--packed-format', default='raw', choices=['raw', 'bits'],
                        help='raw bytes, or 8 ASCII bit characters per packed byte')
    parser.add_argument('--output-format', default='raw', choices=['raw', 'decimal'],
                        help='raw bytes, or one decimal byte value per line')
    parser.add_argument('--lenient', action='store_true',
                        help='Return what can be decoded from a truncated stream')
    parser.add_argument('--stream', action='store_true',
                        help='Stream mode: read packed data from stdin, write to stdout')
    parser.add_argument('--stats', action='store_true',
                        help='Show size statistics')
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
            unpack_stream(args.algorithm, args.packed_format, args.output_format, args.lenient)
        elif args.input and args.output:
            unpack_file(args.input, args.output, args.algorithm, args.packed_format,
                        args.output_format, args.lenient, args.stats)
        else:
            parser.print_help()
            sys.exit(1)
    except (NespakError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
