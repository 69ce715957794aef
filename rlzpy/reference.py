"""A reference built by sampling blocks of the input at even steps."""

from __future__ import annotations

import struct
from array import array
from collections.abc import Iterator, Sequence
from typing import BinaryIO

_SIZE = struct.Struct("=Q")


class UniformSampleReference:
    """Reference for relative Lempel-Ziv built from evenly spaced blocks.

    Blocks of the input are copied at a fixed step; every value of the input
    that none of the blocks contains is then appended once, in order of first
    appearance, so that any input value can be found in the reference.
    Sizes are given in bytes of values ``value_size`` bytes wide.
    """

    value_size = 8
    typecode = "Q"

    def __init__(
        self,
        values: Sequence[int],
        reference_size: int,
        block_size: int = 1024,
        ratio: float = 0,
    ) -> None:
        if any(value == 0 for value in values):
            raise ValueError("input values must be non-zero")
        ref_length = reference_size // self.value_size
        block_length = block_size // self.value_size
        if block_length == 0:
            raise ValueError("block size is smaller than one value")
        num_samples = ref_length // block_length
        if num_samples == 0:
            raise ValueError("reference size is smaller than one block")
        step = len(values) // num_samples
        if step == 0:
            raise ValueError("input is too short for the requested reference size")

        reference: list[int] = []
        for start in range(0, len(values), step):
            reference.extend(values[start:start + block_length])
        seen = set(reference)
        for value in values:
            if value not in seen:
                seen.add(value)
                reference.append(value)
        self._reference = reference
        self.ratio = ratio

    @classmethod
    def _from_values(cls, values: Sequence[int]) -> "UniformSampleReference":
        obj = cls.__new__(cls)
        obj._reference = list(values)
        obj.ratio = 0
        return obj

    def __getitem__(self, index):
        return self._reference[index]

    def __len__(self) -> int:
        return len(self._reference)

    def __iter__(self) -> Iterator[int]:
        return iter(self._reference)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniformSampleReference):
            return NotImplemented
        return self._reference == other._reference

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self._reference)})"

    def serialize(self, out: BinaryIO) -> int:
        """Write the reference to ``out``; return the number of bytes written."""
        try:
            payload = array(self.typecode, self._reference).tobytes()
        except OverflowError as exc:
            raise ValueError("reference value does not fit the value width") from exc
        header = _SIZE.pack(len(self._reference))
        out.write(header)
        out.write(payload)
        return len(header) + len(payload)

    @classmethod
    def load(cls, stream: BinaryIO) -> "UniformSampleReference":
        """Read a reference written by :meth:`serialize`."""
        header = stream.read(_SIZE.size)
        if len(header) != _SIZE.size:
            raise ValueError("truncated reference header")
        (size,) = _SIZE.unpack(header)
        values = array(cls.typecode)
        payload = stream.read(size * values.itemsize)
        if len(payload) != size * values.itemsize:
            raise ValueError("truncated reference data")
        values.frombytes(payload)
        return cls._from_values(values)