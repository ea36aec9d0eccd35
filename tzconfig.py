# -*- coding: utf-8 -*-
# Time configuration: the fixed local time offset used for formatting timestamps
# Usage: from tzconfig import TimeConfig
#
# MIT License (MIT), see LICENSE - Copyright (c) 2025 Istvan Z. Kovacs
#
import os

# Default (reset) values
timeConfig = {
  'tz_offset': 0, # minutes from UTC, -720 to 840
}

TZ_OFFSET_MIN = -720
TZ_OFFSET_MAX = 840


class TimeConfig(object):
    """
    The time configuration.

    Owned by the application and passed to the timestamp formatting functions.
    The local offset can be set from the TZ_OFFSET value in the settings.toml file (environment).
    """

    def __init__(self, tz_offset: int = None):
        if tz_offset is None:
            tz_offset = timeConfig['tz_offset']
        self.tz_offset = tz_offset

    @property
    def tz_offset(self) -> int:
        """ Local time offset from UTC, in minutes """
        return self._tz_offset

    @tz_offset.setter
    def tz_offset(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"tz_offset must be an int, not {type(value).__name__}")
        if not TZ_OFFSET_MIN <= value <= TZ_OFFSET_MAX:
            raise ValueError(f"tz_offset {value} out of range [{TZ_OFFSET_MIN}, {TZ_OFFSET_MAX}]")
        self._tz_offset = value

    def reset(self):
        """ Restore the default values """
        self.tz_offset = timeConfig['tz_offset']

    @classmethod
    def from_env(cls) -> "TimeConfig":
        """
        Create the configuration from the TZ_OFFSET environment value.

        Returns:
            TimeConfig: The configuration, with the default offset when TZ_OFFSET is not set
        """
        _tz_offset = os.getenv("TZ_OFFSET")
        if _tz_offset is None:
            return cls()
        try:
            return cls(int(_tz_offset))
        except ValueError as e:
            raise ValueError(f"Invalid TZ_OFFSET '{_tz_offset}': {e}") from e

    def __repr__(self):
        return f"TimeConfig(tz_offset={self._tz_offset})"
