from rlzpy import timing


def _burn():
    return sum(i * i for i in range(200_000))


def test_user_time_non_negative():
    assert timing.user_time_us() >= 0


def test_system_time_non_negative():
    assert timing.system_time_us() >= 0


def test_user_time_never_decreases():
    before = timing.user_time_us()
    _burn()
    after = timing.user_time_us()
    assert after >= before


def test_system_time_never_decreases():
    before = timing.system_time_us()
    _burn()
    after = timing.system_time_us()
    assert after >= before