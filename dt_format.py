# -*- coding: utf-8 -*-
# Render calendar fields as ISO 8601 timestamps, in UTC or in the configured local offset
#
# MIT License (MIT), see LICENSE - Copyright (c) 2025 Istvan Z. Kovacs
#
from rtc_time import DateTime, calendar_to_epoch, epoch_to_calendar, epoch_millis, epoch_seconds, make_epoch
from tzconfig import TimeConfig


def _format(dt: DateTime, offset: int) -> str:
    """
    Format the timestamp, shifted by offset minutes.

    The output has always the same length, e.g. "2024-01-05T13:07:02.123+00:00".
    The sign of the suffix follows the sign of the offset, so -30 gives "-00:30".
    """
    sign = '+'
    if offset != 0:
        utc_time = calendar_to_epoch(dt)
        local_time = make_epoch(epoch_seconds(utc_time) + offset * 60, epoch_millis(utc_time))
        dt = epoch_to_calendar(local_time)
        if offset < 0:
            sign = '-'
    tz_hours, tz_minutes = divmod(abs(offset), 60)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{dt.millis:03d}"
        f"{sign}{tz_hours:02d}:{tz_minutes:02d}"
    )


def format_utc(dt: DateTime) -> str:
    """ Format the (UTC) calendar fields as is, with a +00:00 suffix """
    return _format(dt, 0)


def format_local(dt: DateTime, config: TimeConfig) -> str:
    """
    Format the (UTC) calendar fields in the local time of the configuration.

    Args:
        dt (DateTime): The calendar fields, UTC
        config (TimeConfig): Supplies the local offset (tz_offset, minutes)

    Returns:
        str: The local timestamp with its offset suffix, e.g. "1970-01-01T05:30:00.000+05:30"
    """
    return _format(dt, config.tz_offset)
