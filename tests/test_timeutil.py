import pytest

from raidengine import timeutil
from raidengine.timeutil import NANOS_PER_MILLI, NANOS_PER_SECOND


def test_now_is_monotonic_and_initialized():
    a = timeutil.now()
    b = timeutil.now()
    assert b >= a
    assert timeutil.is_initialized(a)
    assert not timeutil.is_initialized(0)


def test_from_delta_time_truncates():
    assert timeutil.from_delta_time(2.7) == 2 * NANOS_PER_SECOND
    assert timeutil.from_delta_time(0.4) == 0


def test_to_seconds_and_millis_truncate():
    assert timeutil.to_seconds(5 * NANOS_PER_SECOND + 999) == 5
    assert timeutil.to_seconds(-(NANOS_PER_SECOND + 1)) == -1
    assert timeutil.to_millis(250 * NANOS_PER_MILLI + 7) == 250


def test_format_short():
    assert timeutil.format_hms(0) == "00:00"
    assert timeutil.format_hms(90 * NANOS_PER_SECOND) == "01:30"


def test_format_with_hours():
    assert timeutil.format_hms(3661 * NANOS_PER_SECOND) == "01:01:01"


def test_format_ignores_sub_second():
    whole = 125 * NANOS_PER_SECOND
    assert timeutil.format_hms(whole + NANOS_PER_SECOND - 1) == timeutil.format_hms(whole)


def test_count_nanos():
    assert timeutil.count_nanos_in_seconds(NANOS_PER_SECOND // 60, 1) == 60
    assert timeutil.count_nanos_in_millis(NANOS_PER_MILLI, 250) == 250


def test_count_nanos_zero_span_raises():
    with pytest.raises(ZeroDivisionError):
        timeutil.count_nanos_in_seconds(0, 1)