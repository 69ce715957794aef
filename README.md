# rlzpy

Relative Lempel-Ziv (RLZ) factorization for sequences of positive 64-bit
integers.

A reference is built from the input. Blocks are copied from the input at even
steps. Then every value that the blocks missed is appended once, in the order
it first appears. This means any value of the input can be found in the
reference. The input is then split greedily into factors `(offset, length)`.
Each factor is the longest prefix of the remaining input that occurs in the
reference. A suffix array of the reversed reference finds these prefixes.
Decompressing the factors restores the input exactly.

Input values must be non-zero.

## Installation

```
pip install .
```

No third-party packages are needed. To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

### random-integers

```
random-integers data.bin 1000000 500
```

This command writes a file of random native-endian unsigned 64-bit values.
The arguments are:

- the output path
- the number of values
- the alphabet size

Values are drawn uniformly from `1..alphabet_size`.

### rlz

```
rlz data.bin 1 1024
```

This command reads a file of native-endian unsigned 64-bit values and
factorizes it. It then decompresses the factors, checks the result against
the input, and prints `Phrases: <count>`. The arguments are:

- the input path
- the reference size in megabytes
- the block size in bytes

Exit status:

- `0`: the round trip succeeded.
- `10`: the input contains a zero. The command prints `Movements contains 0`.
- `1`: the decompressed size differs from the input size (`Error size`), or a
  value differs (`Error movement: <index>`).
- `2`: the command was not given exactly three arguments.

Both commands can also be run as `python -m rlzpy.compress_cli` and
`python -m rlzpy.random_integers`.

## Library

```python
from rlzpy.rlz import RlzNaive
from rlzpy.random_integers import generate

values = generate(10_000, 50, seed=1)
rlz = RlzNaive(values, reference_size=8 * 1024, block_size=64, ratio=0)
factors = list(rlz.factorize(values))
assert rlz.decompress(factors) == values
print(len(factors), "phrases")
```

### `rlzpy.rlz`

- `Factor(offset, length)` is a frozen dataclass for one phrase.
- `RlzNaive(values, reference_size, block_size=1024, ratio=0)` builds the
  reference and its suffix array. Sizes are given in bytes of 8-byte values.
  Its methods are:
  - `factorize(values)` is a generator of `Factor`s. It raises `ValueError` if
    a value is not in the reference.
  - `decompress(factors)` returns the values as a list. It raises
    `ValueError` for a factor that lies outside the reference.
  - `serialize(out)` writes the reference and the suffix array to a binary
    stream and returns the number of bytes written. The class method
    `RlzNaive.load(stream)` reads them back.
  - The `reference` attribute holds the `UniformSampleReference`.

### `rlzpy.reference`

- `UniformSampleReference(values, reference_size, block_size=1024, ratio=0)`
  is the sampled reference. It supports indexing, slicing, `len`, iteration
  and equality.
- `serialize(out)` and the class method `load(stream)` write the reference as
  a 64-bit length followed by the values, and read it back.
- It raises `ValueError` in these cases:
  - the input contains a zero
  - the block is smaller than one value
  - the reference is smaller than one block
  - the input is too short for the requested reference size

### `rlzpy.random_integers`

- `generate(count, alphabet_size, seed=None)` returns `count` values in
  `1..alphabet_size`.

### `rlzpy.compress_cli`

- `run(input_path, reference_megabytes, block_size)` does the same work as
  the `rlz` command and returns the phrase count. It raises
  `ZeroValueError` (a `ValueError`) or `VerificationError` (a
  `RuntimeError`).

### `rlzpy.fileutil`

- `read_from_file(path, typecode)` reads raw native-endian arrays and returns
  an `array.array`. `write_to_file(path, values, typecode)` writes them. Both
  take an `array` typecode.
- `file_size`, `file_exists` and `remove_file` are small file helpers. Errors
  give `0` or `False`; they are not raised.
- `remove_path`, `remove_extension` and `index_file(index_name, args)` build
  names. `index_file` joins the index name, the bare dataset name from
  `args[1]`, and any later arguments with `_`.

### `rlzpy.timing`

- `user_time_us()` and `system_time_us()` return the process's CPU time in
  microseconds.

### `rlzpy.memory`

- `total_memory_bytes()`, `total_memory_megabytes()` and
  `total_memory_gigabytes()` return the installed physical memory. They raise
  `OSError` where the platform cannot report it.

## What it does not do

The package has no compressed file format. The `rlz` command only measures
and verifies the factorization and writes nothing. Factors exist only in
memory, and there is no command that decompresses a file. `RlzNaive.serialize`
stores the reference and suffix array, not the factors. The suffix array is
built in pure Python, so the package suits moderate input sizes rather than
large datasets.