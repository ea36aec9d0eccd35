# -*- coding: utf-8 -*-
# Real time clock kept as an offset from the monotonic uptime counter
#
# MIT License (MIT), see LICENSE - Copyright (c) 2025 Istvan Z. Kovacs
#
import time
import adafruit_logging as logging

from rtc_time import DateTime, calendar_to_epoch, epoch_to_calendar

# Returned by get_calendar() while the time is not known, 0000-01-01T00:00:00.000
UNSET_DATETIME = DateTime(0, 1, 1, 0, 0, 0, 0)

rtclog = logging.getLogger('rtc')


def millis() -> int:
    """ Milliseconds elapsed since an arbitrary (boot) reference, non-decreasing """
    return time.monotonic_ns() // 1_000_000


class RTC(object):
    """
    Wall clock time derived from the uptime counter.

    Only the difference between the epoch time and the uptime at the moment of the
    last set() is stored, the current time is recomputed on every get().
    Create one instance per process and pass it to the code needing the time.
    """

    def __init__(self, uptime_ms=millis):
        # Uptime source, callable returning milliseconds
        self._uptime_ms = uptime_ms

        # Epoch time at uptime 0; None until the time is set
        self._started = None

    def has_time(self) -> bool:
        """ True if the time has been set """
        return self._started is not None

    def get(self) -> int | None:
        """
        Get the current time.

        Returns:
            int: Milliseconds since 1970-01-01T00:00:00.000, or None if the time was never set
        """
        started = self._started
        if started is None:
            return None
        return started + self._uptime_ms()

    def set(self, t: int) -> bool:
        """
        Set the current time.

        Args:
            t (int): Milliseconds since 1970-01-01T00:00:00.000

        Returns:
            bool: Always True
        """
        first = self._started is None
        self._started = t - self._uptime_ms()
        if first:
            rtclog.info(f"RTC time established: {t}")
        else:
            rtclog.debug(f"RTC time adjusted: {t}")
        return True

    def get_calendar(self) -> tuple[DateTime, bool]:
        """
        Get the current time as calendar fields (UTC).

        Returns:
            tuple[DateTime, bool]: The calendar fields and True, or UNSET_DATETIME and False if the time was never set
        """
        t = self.get()
        if t is None:
            return UNSET_DATETIME, False
        return epoch_to_calendar(t), True

    def set_calendar(self, dt: DateTime) -> bool:
        """ Set the current time from calendar fields (UTC). Always returns True. """
        return self.set(calendar_to_epoch(dt))

    @property
    def datetime(self) -> DateTime:
        """ Current time as calendar fields (UTC), UNSET_DATETIME if the time was never set """
        return self.get_calendar()[0]

    @datetime.setter
    def datetime(self, value: DateTime):
        """ Set the current time from calendar fields (UTC) """
        self.set_calendar(value)
