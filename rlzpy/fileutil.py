"""Helpers for files of fixed-width integers and for naming index files."""

from __future__ import annotations

import os
from array import array
from collections.abc import Iterable, Sequence

BUFFER_BLOCK_SIZE = 1 << 22
"""Number of values moved per read or write call."""

_SEPARATORS = "\\/"


def file_size(path: str | os.PathLike) -> int:
    """Return the size of ``path`` in bytes, or 0 if it cannot be read."""
    try:
        return os.stat(path).st_size
    except OSError:
        return 0


def file_exists(path: str | os.PathLike) -> bool:
    """Return True if ``path`` exists."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def remove_file(path: str | os.PathLike) -> bool:
    """Delete ``path``; return True on success and False otherwise."""
    try:
        os.remove(path)
    except OSError:
        return False
    return True


def _last_separator(file: str) -> int:
    return max(file.rfind(sep) for sep in _SEPARATORS)


def remove_path(file: str) -> str:
    """Strip everything up to and including the last slash or backslash."""
    pos = _last_separator(file)
    return file[pos + 1:] if pos != -1 else file


def remove_extension(file: str) -> str:
    """Strip the extension of the last path component, if it has one."""
    slash = _last_separator(file)
    dot = file.rfind(".")
    if dot != -1 and (slash == -1 or slash < dot):
        return file[:dot]
    return file


def index_file(index_name: str, args: Sequence[str]) -> str:
    """Build an index file name from a program's arguments.

    ``args`` is laid out like ``sys.argv``: the dataset path in ``args[1]``
    contributes its bare name, every later argument is appended as is.
    """
    parts = [index_name]
    if len(args) > 1:
        parts.append(remove_extension(remove_path(args[1])))
    parts.extend(str(arg) for arg in args[2:])
    return "_".join(parts)


def read_from_file(path: str | os.PathLike, typecode: str) -> array:
    """Read a file of native-endian values of the given ``array`` typecode.

    Trailing bytes that do not make up a whole value are ignored.
    """
    values = array(typecode)
    itemsize = values.itemsize
    remaining = (file_size(path) // itemsize) * itemsize
    block_bytes = BUFFER_BLOCK_SIZE * itemsize
    with open(path, "rb") as handle:
        while remaining > 0:
            chunk = handle.read(min(block_bytes, remaining))
            if not chunk:
                break
            values.frombytes(chunk)
            remaining -= len(chunk)
    return values


def write_to_file(path: str | os.PathLike, values: Iterable[int], typecode: str) -> None:
    """Write ``values`` as native-endian values of the given ``array`` typecode."""
    data = values if isinstance(values, array) and values.typecode == typecode else array(typecode, values)
    raw = memoryview(data).cast("B")
    block_bytes = BUFFER_BLOCK_SIZE * data.itemsize
    with open(path, "wb") as handle:
        for start in range(0, len(raw), block_bytes):
            handle.write(raw[start:start + block_bytes])