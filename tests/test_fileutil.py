import struct
from array import array

import pytest

from rlzpy import fileutil


def test_remove_path_forward_slash():
    assert fileutil.remove_path("data/sets/movements.bin") == "movements.bin"


def test_remove_path_backslash():
    assert fileutil.remove_path("data\\movements.bin") == "movements.bin"


def test_remove_path_without_separator():
    assert fileutil.remove_path("movements.bin") == "movements.bin"


def test_remove_extension_basic():
    assert fileutil.remove_extension("data/movements.bin") == "data/movements"


def test_remove_extension_only_last_dot():
    assert fileutil.remove_extension("a.tar.gz") == "a.tar"


def test_remove_extension_dot_in_directory():
    assert fileutil.remove_extension("dir.v1/file") == "dir.v1/file"


def test_index_file_with_arguments():
    args = ["prog", "data/movements.bin", "4", "1024"]
    assert fileutil.index_file("rlz", args) == "rlz_movements_4_1024"


def test_index_file_without_dataset():
    assert fileutil.index_file("rlz", ["prog"]) == "rlz"


def test_file_size_missing(tmp_path):
    assert fileutil.file_size(tmp_path / "missing") == 0


def test_file_exists_and_remove(tmp_path):
    path = tmp_path / "f.bin"
    path.write_bytes(b"abc")
    assert fileutil.file_exists(path)
    assert fileutil.file_size(path) == 3
    assert fileutil.remove_file(path)
    assert not fileutil.file_exists(path)
    assert not fileutil.remove_file(path)


@pytest.mark.parametrize("typecode", ["Q", "I", "B"])
def test_write_read_round_trip(tmp_path, typecode):
    path = tmp_path / "values.bin"
    values = [1, 2, 3, 250, 7]
    fileutil.write_to_file(path, values, typecode)
    assert fileutil.read_from_file(path, typecode).tolist() == values
    assert fileutil.file_size(path) == len(values) * array(typecode).itemsize


def test_written_bytes_are_native(tmp_path):
    path = tmp_path / "values.bin"
    fileutil.write_to_file(path, [5, 9], "Q")
    assert path.read_bytes() == struct.pack("=QQ", 5, 9)


def test_read_ignores_partial_value(tmp_path):
    path = tmp_path / "values.bin"
    path.write_bytes(struct.pack("=Q", 42) + b"\x01\x02")
    assert fileutil.read_from_file(path, "Q").tolist() == [42]


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    assert len(fileutil.read_from_file(path, "Q")) == 0


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        fileutil.read_from_file(tmp_path / "missing.bin", "Q")