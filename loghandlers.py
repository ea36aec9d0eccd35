# -*- coding: utf-8 -*-
# Custom logging handlers
#
# MIT License (MIT), see LICENSE - Copyright (c) 2025 Istvan Z. Kovacs
#
from adafruit_logging import Handler, LogRecord

from dt_format import format_local, format_utc
from rtc_clock import RTC
from tzconfig import TimeConfig


class RTCLogHandler(Handler):
    """ Logging with the RTC time as timestamp. """

    def __init__(self, rtc: RTC, config: TimeConfig = None):
        """Create an instance.

        :param RTC rtc: The clock providing the timestamps
        :param TimeConfig config: The local offset for the timestamps, UTC if None
        """
        super().__init__()
        self.rtc = rtc
        self.config = config if config is not None else TimeConfig()

    def timestamp(self) -> str:
        """Current RTC time, 0000-01-01T00:00:00.000+00:00 while the time is not set."""
        _created, _has_time = self.rtc.get_calendar()
        if not _has_time:
            return format_utc(_created)
        return format_local(_created, self.config)

    def format(self, record: LogRecord) -> str:
        """Generate a timestamped message.

        :param LogRecord record: The record (message object) to be logged
        """
        return f"{self.timestamp()} - {record.name} - {record.levelname} - {record.msg}"

    def emit(self, record: LogRecord):
        """Generate the message.

        :param LogRecord record: The record (message object) to be logged
        """
        print(self.format(record))
