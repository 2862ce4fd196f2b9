import time

import pytest

from algonotes.timing import measure_ns


def test_calls_function_repeat_times():
    calls = []
    result = measure_ns(lambda: calls.append(1), 25)
    assert len(calls) == 25
    assert result >= 0


def test_reports_at_least_sleep_duration():
    result = measure_ns(lambda: time.sleep(0.002), 2)
    assert result >= 2_000_000


def test_rejects_nonpositive_repeat():
    with pytest.raises(ValueError):
        measure_ns(lambda: None, 0)