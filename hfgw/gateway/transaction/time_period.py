from datetime import timedelta
from enum import Enum


class TimeUnit(Enum):
    MILLISECONDS = 'milliseconds'
    SECONDS = 'seconds'
    MINUTES = 'minutes'
    HOURS = 'hours'
    DAYS = 'days'


class TimePeriod(object):
    """A duration expressed in a unit, e.g. ``TimePeriod(7, TimeUnit.DAYS)``."""

    def __init__(self, duration, unit=TimeUnit.SECONDS):
        if isinstance(unit, str):
            unit = TimeUnit(unit.lower())
        if not isinstance(unit, TimeUnit):
            raise ValueError(f'Invalid time unit: {unit}')
        if duration is None or duration < 0:
            raise ValueError(f'Invalid duration: {duration}')

        self._duration = duration
        self._unit = unit

    @staticmethod
    def from_setting(setting):
        """Build a TimePeriod from a config value.

        Accepts a TimePeriod, a number of seconds, or a mapping with
        ``duration`` and optional ``unit`` keys.
        """
        if isinstance(setting, TimePeriod):
            return setting
        if isinstance(setting, (int, float)) and not isinstance(setting, bool):
            return TimePeriod(setting)
        if isinstance(setting, dict) and 'duration' in setting:
            return TimePeriod(setting['duration'], setting.get('unit', TimeUnit.SECONDS))

        raise ValueError(f'Invalid time period setting: {setting}')

    @property
    def duration(self):
        return self._duration

    @property
    def unit(self):
        return self._unit

    def to_timedelta(self):
        return timedelta(**{self._unit.value: self._duration})

    def total_seconds(self):
        return self.to_timedelta().total_seconds()

    def __eq__(self, other):
        if not isinstance(other, TimePeriod):
            return NotImplemented
        return self._duration == other._duration and self._unit == other._unit

    def __hash__(self):
        return hash((self._duration, self._unit))

    def __repr__(self):
        return f'TimePeriod({self._duration}, {self._unit})'

    def __str__(self):
        return f'{self._duration} {self._unit.value}'
