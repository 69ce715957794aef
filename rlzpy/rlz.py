"""Relative Lempel-Ziv factorization against a sampled reference."""

from __future__ import annotations

import struct
from array import array
from bisect import bisect_left
from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import pairwise
from typing import BinaryIO

from rlzpy.reference import UniformSampleReference

_SIZE = struct.Struct("=Q")


@dataclass(frozen=True)
class Factor:
    """A phrase: ``length`` values copied from the reference at ``offset``."""

    offset: int
    length: int


def _suffix_array(text: Sequence[int]) -> list[int]:
    """Suffix array of ``text`` by prefix doubling."""
    n = len(text)
    rank = list(text)
    order = list(range(n))
    k = 1
    while True:
        def key(i: int) -> tuple[int, int]:
            return rank[i], rank[i + k] if i + k < n else -1

        order.sort(key=key)
        new_rank = [0] * n
        for prev, cur in pairwise(order):
            new_rank[cur] = new_rank[prev] + (key(cur) != key(prev))
        rank = new_rank
        if rank[order[-1]] == n - 1:
            return order
        k *= 2


class RlzNaive:
    """Greedy RLZ factorizer backed by a suffix array of the reversed reference.

    Each phrase is the longest prefix of the remaining input that occurs in
    the reference; among several occurrences the one found first by
    backward search over the reversed reference is chosen.
    """

    def __init__(
        self,
        values: Sequence[int],
        reference_size: int,
        block_size: int = 1024,
        ratio: float = 0,
    ) -> None:
        reference = UniformSampleReference(values, reference_size, block_size, ratio)
        self._setup(reference)

    def _setup(self, reference: UniformSampleReference, suffix_array: Sequence[int] | None = None) -> None:
        self.reference = reference
        symbols = sorted(set(reference))
        self._char2comp = {value: code for code, value in enumerate(symbols, 1)}
        text = [self._char2comp[value] for value in reversed(list(reference))]
        text.append(0)
        if suffix_array is None:
            sa = _suffix_array(text)
        else:
            sa = list(suffix_array)
            if sorted(sa) != list(range(len(text))):
                raise ValueError("suffix array does not match the reference")
        self._sa = sa

        occurrences: dict[int, list[int]] = defaultdict(list)
        for i, p in enumerate(sa):
            occurrences[text[p - 1]].append(i)
        self._occurrences = dict(occurrences)

        counts = Counter(text)
        cumulative = [0] * (len(symbols) + 2)
        for code in range(1, len(cumulative)):
            cumulative[code] = cumulative[code - 1] + counts[code - 1]
        self._c = cumulative

    def _rank(self, i: int, code: int) -> int:
        return bisect_left(self._occurrences.get(code, ()), i)

    def factorize(self, values: Sequence[int]) -> Iterator[Factor]:
        """Yield the factors of ``values`` in order."""
        n = len(self.reference)
        last = len(self._sa) - 1
        size = len(values)
        pos = 0
        while pos < size:
            start, end = 0, last
            start_input = pos
            while pos < size:
                value = values[pos]
                code = self._char2comp.get(value)
                if code is None:
                    raise ValueError(f"value {value} at position {pos} is not in the reference")
                if start == 0 and end == last:
                    res_start, res_end = self._c[code], self._c[code + 1] - 1
                else:
                    res_start = self._c[code] + self._rank(start, code)
                    res_end = self._c[code] + self._rank(end + 1, code) - 1
                if res_end < res_start:
                    break
                start, end = res_start, res_end
                pos += 1
            length = pos - start_input
            yield Factor(n - (self._sa[start] + length), length)

    def decompress(self, factors: Iterable[Factor]) -> list[int]:
        """Rebuild the values described by ``factors``."""
        result: list[int] = []
        size = len(self.reference)
        for factor in factors:
            if factor.offset < 0 or factor.length < 0 or factor.offset + factor.length > size:
                raise ValueError(f"factor {factor} lies outside the reference")
            result.extend(self.reference[factor.offset:factor.offset + factor.length])
        return result

    def serialize(self, out: BinaryIO) -> int:
        """Write the reference and its suffix array; return bytes written."""
        written = self.reference.serialize(out)
        header = _SIZE.pack(len(self._sa))
        payload = array("Q", self._sa).tobytes()
        out.write(header)
        out.write(payload)
        return written + len(header) + len(payload)

    @classmethod
    def load(cls, stream: BinaryIO) -> "RlzNaive":
        """Read a factorizer written by :meth:`serialize`."""
        reference = UniformSampleReference.load(stream)
        header = stream.read(_SIZE.size)
        if len(header) != _SIZE.size:
            raise ValueError("truncated suffix array header")
        (size,) = _SIZE.unpack(header)
        sa = array("Q")
        payload = stream.read(size * sa.itemsize)
        if len(payload) != size * sa.itemsize:
            raise ValueError("truncated suffix array data")
        sa.frombytes(payload)
        obj = cls.__new__(cls)
        obj._setup(reference, sa)
        return obj