import time

from scenehub.shared import now_epoch_ms


def test_now_epoch_ms_is_milliseconds():
    before = int(time.time() * 1000)
    value = now_epoch_ms()
    after = int(time.time() * 1000)

    assert isinstance(value, int)
    assert before <= value <= after
