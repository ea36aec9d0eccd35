from __future__ import annotations

from dt_format import format_local, format_utc
from rtc_time import DateTime, epoch_to_calendar
from tzconfig import TimeConfig


def test_utc_epoch_zero():
    assert format_utc(epoch_to_calendar(0)) == "1970-01-01T00:00:00.000+00:00"


def test_utc_fields_as_is():
    assert format_utc(DateTime(2024, 1, 5, 13, 7, 2, 123)) == "2024-01-05T13:07:02.123+00:00"


def test_unset_sentinel():
    assert format_utc(DateTime(0, 1, 1, 0, 0, 0, 0)) == "0000-01-01T00:00:00.000+00:00"


def test_local_zero_offset_is_utc():
    dt = DateTime(2024, 1, 5, 13, 7, 2, 123)
    assert format_local(dt, TimeConfig()) == format_utc(dt)


def test_local_positive_offset():
    dt = epoch_to_calendar(0)
    assert format_local(dt, TimeConfig(330)) == "1970-01-01T05:30:00.000+05:30"


def test_local_negative_offset():
    dt = DateTime(2024, 1, 5, 13, 7, 2, 123)
    assert format_local(dt, TimeConfig(-300)) == "2024-01-05T08:07:02.123-05:00"


def test_local_negative_offset_before_reference():
    dt = epoch_to_calendar(0)
    assert format_local(dt, TimeConfig(-300)) == "1969-12-31T19:00:00.000-05:00"


def test_local_offset_under_one_hour_keeps_sign():
    dt = DateTime(2024, 3, 1, 0, 10, 0, 5)
    assert format_local(dt, TimeConfig(-30)) == "2024-02-29T23:40:00.005-00:30"
    assert format_local(dt, TimeConfig(45)) == "2024-03-01T00:55:00.005+00:45"


def test_local_offset_crosses_year():
    dt = DateTime(2024, 12, 31, 20, 0, 0, 999)
    assert format_local(dt, TimeConfig(840)) == "2025-01-01T10:00:00.999+14:00"


def test_fixed_length():
    cfg = TimeConfig(-720)
    for t in (0, 86_399_999, 1_704_460_022_123, 4_102_444_799_999):
        dt = epoch_to_calendar(t)
        assert len(format_utc(dt)) == 29
        assert len(format_local(dt, cfg)) == 29


def test_local_out_of_range_month_does_not_raise():
    assert format_local(DateTime(2024, 13, 1, 0, 0, 0, 0), TimeConfig(60)) == "2025-01-01T01:00:00.000+01:00"
