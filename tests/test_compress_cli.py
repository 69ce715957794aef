import random

import pytest

from rlzpy.compress_cli import ZeroValueError, main, run
from rlzpy.fileutil import write_to_file

ONE_MB = 1024 * 1024


def _write(tmp_path, values):
    path = tmp_path / "input.bin"
    write_to_file(path, values, "Q")
    return str(path)


def test_run_reference_covers_whole_input(tmp_path):
    rng = random.Random(5)
    values = [rng.randrange(20) + 1 for _ in range(200)]
    assert run(_write(tmp_path, values), 1, ONE_MB) == 1


def test_run_counts_phrases_bounded_by_input(tmp_path):
    rng = random.Random(9)
    values = [rng.randrange(50) + 1 for _ in range(3000)]
    phrases = run(_write(tmp_path, values), 1, 8192)
    assert 1 <= phrases <= len(values)


def test_run_rejects_zero(tmp_path):
    path = _write(tmp_path, [1, 2, 0, 3])
    with pytest.raises(ZeroValueError):
        run(path, 1, ONE_MB)


def test_main_zero_exit_code(tmp_path, capsys):
    path = _write(tmp_path, [4, 0, 5])
    assert main([path, "1", str(ONE_MB)]) == 10
    assert "Movements contains 0" in capsys.readouterr().out


def test_main_reports_phrases(tmp_path, capsys):
    path = _write(tmp_path, [3, 1, 4, 1, 5, 9, 2, 6])
    assert main([path, "1", str(ONE_MB)]) == 0
    assert "Phrases: 1" in capsys.readouterr().out


def test_main_wrong_argument_count():
    assert main(["only-one"]) == 2