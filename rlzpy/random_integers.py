"""Write a file of random positive 64-bit values."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence

from rlzpy.fileutil import write_to_file


def generate(count: int, alphabet_size: int, seed: int | None = None) -> list[int]:
    """Return ``count`` random values drawn uniformly from 1..``alphabet_size``."""
    if alphabet_size <= 0:
        raise ValueError("alphabet size must be positive")
    if count < 0:
        raise ValueError("count must not be negative")
    rng = random.Random(seed)
    return [rng.randrange(alphabet_size) + 1 for _ in range(count)]


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("usage: random_integers <output> <count> <alphabet_size>", file=sys.stderr)
        return 2
    output, count, alphabet_size = args[0], int(args[1]), int(args[2])
    write_to_file(output, generate(count, alphabet_size), "Q")
    return 0


if __name__ == "__main__":
    sys.exit(main())