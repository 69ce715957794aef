"""Factorize a file of 64-bit values and check that it decompresses intact."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from rlzpy.fileutil import read_from_file
from rlzpy.rlz import RlzNaive


class ZeroValueError(ValueError):
    """The input holds a zero, which the factorizer cannot handle."""


class VerificationError(RuntimeError):
    """Decompressed output differs from the input."""


def run(input_path: str, reference_megabytes: int, block_size: int) -> int:
    """Factorize the file, verify the decompression, return the phrase count."""
    values = list(read_from_file(input_path, "Q"))
    if any(value == 0 for value in values):
        raise ZeroValueError("Movements contains 0")
    rlz = RlzNaive(values, reference_megabytes * 1024 * 1024, block_size)
    factors = list(rlz.factorize(values))
    result = rlz.decompress(factors)
    if len(result) != len(values):
        raise VerificationError("Error size")
    for i, (got, expected) in enumerate(zip(result, values)):
        if got != expected:
            raise VerificationError(f"Error movement: {i}")
    return len(factors)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("usage: rlz <input> <reference_megabytes> <block_size>", file=sys.stderr)
        return 2
    input_path, reference_megabytes, block_size = args[0], int(args[1]), int(args[2])
    try:
        print("Decompressing: ", end="", flush=True)
        phrases = run(input_path, reference_megabytes, block_size)
    except ZeroValueError as exc:
        print(exc)
        return 10
    except VerificationError as exc:
        print(exc)
        return 1
    print(f"Phrases: {phrases}")
    return 0


if __name__ == "__main__":
    sys.exit(main())