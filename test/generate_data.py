#!/usr/bin/env python3
"""Generate NES-style tile data for benchmarking."""

import os
import random
import sys


def generate_tiles(count: int, output_path: str):
    """Generate a nametable-like byte stream: long background runs with sparse detail."""
    background = [0x00, 0x24, 0xFF]
    detail = list(range(0x30, 0x50))

    data = bytearray()
    while len(data) < count:
        if random.random() < 0.7:
            data.extend([random.choice(background)] * random.randint(4, 300))
        else:
            data.extend(random.choice(detail) for _ in range(random.randint(1, 12)))
    del data[count:]

    with open(output_path, 'wb') as f:
        f.write(data)

    print(f"Generated {count} bytes to {output_path}")
    print(f"File size: {os.path.getsize(output_path):,} bytes")


if __name__ == '__main__':
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 4096
    output = sys.argv[2] if len(sys.argv) > 2 else 'test/sample_tiles.bin'
    generate_tiles(count, output)
