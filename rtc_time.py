# -*- coding: utf-8 -*-
# Millisecond epoch timestamps and their conversion to/from calendar fields
#
# MIT License (MIT), see LICENSE - Copyright (c) 2025 Istvan Z. Kovacs
#
from collections import namedtuple

UNIX_REFERENCE_YEAR = 1970
MILLIS_PER_SECOND = 1000
DAYS_PER_GROUP = 365 * 4 + 1

# Broken-down calendar time, UTC unless stated otherwise
DateTime = namedtuple("DateTime", ("year", "month", "day", "hour", "minute", "second", "millis"))

# Day (0-based) on which each month starts, for the 4 years of a group starting at 1970.
# The third year of each group (1972, ..., 2024, 2028) is the leap year.
DAYS = (
    (   0,   31,   59,   90,  120,  151,  181,  212,  243,  273,  304,  334),
    ( 365,  396,  424,  455,  485,  516,  546,  577,  608,  638,  669,  699),
    ( 730,  761,  790,  821,  851,  882,  912,  943,  974, 1004, 1035, 1065),
    (1096, 1127, 1155, 1186, 1216, 1247, 1277, 1308, 1339, 1369, 1400, 1430),
)


def make_epoch(seconds: int, millis: int) -> int:
    """ Build an epoch timestamp (ms since 1970-01-01T00:00:00.000) from seconds and milliseconds """
    return seconds * MILLIS_PER_SECOND + millis


def epoch_seconds(t: int) -> int:
    """ Whole seconds part of the epoch timestamp """
    return t // MILLIS_PER_SECOND


def epoch_millis(t: int) -> int:
    """ Milliseconds part (0-999) of the epoch timestamp """
    return t % MILLIS_PER_SECOND


def calendar_to_epoch(dt: DateTime) -> int:
    """
    Convert calendar fields to an epoch timestamp.

    The fields are not validated. Results are exact for dates between
    1901-03-01 and 2099-12-31, the century leap rule is not applied.

    Args:
        dt (DateTime): The calendar fields, UTC

    Returns:
        int: Milliseconds since 1970-01-01T00:00:00.000
    """
    carry, month = divmod(dt.month - 1, 12)
    group, year = divmod(dt.year + carry - UNIX_REFERENCE_YEAR, 4)
    days = group * DAYS_PER_GROUP + DAYS[year][month] + dt.day - 1
    unix_time = ((days * 24 + dt.hour) * 60 + dt.minute) * 60 + dt.second
    return make_epoch(unix_time, dt.millis)


def epoch_to_calendar(t: int) -> DateTime:
    """
    Convert an epoch timestamp to calendar fields.

    Inverse of calendar_to_epoch(). Negative timestamps are resolved with floor
    division, so e.g. -1 is 1969-12-31T23:59:59.999.

    Args:
        t (int): Milliseconds since 1970-01-01T00:00:00.000

    Returns:
        DateTime: The calendar fields, UTC
    """
    unix_time = epoch_seconds(t)
    unix_time, second = divmod(unix_time, 60)
    unix_time, minute = divmod(unix_time, 60)
    days, hour = divmod(unix_time, 24)

    group, days = divmod(days, DAYS_PER_GROUP)

    for year in range(3, 0, -1):
        if days >= DAYS[year][0]:
            break
    else:
        year = 0

    for month in range(11, 0, -1):
        if days >= DAYS[year][month]:
            break
    else:
        month = 0

    return DateTime(
        group * 4 + year + UNIX_REFERENCE_YEAR,
        month + 1,
        days - DAYS[year][month] + 1,
        hour,
        minute,
        second,
        epoch_millis(t),
    )
