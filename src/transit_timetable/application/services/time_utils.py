"""Pure helpers for departure times and day-types."""

import re
from datetime import date

from transit_timetable.domain.errors import MalformedTimeError
from transit_timetable.domain.models.day_type import DayType
from transit_timetable.domain.models.departure_time import DepartureTime

# Leading zeros are optional: "7:5" is 07:05.
_TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{1,2})")


def parse_departure_time(value: str) -> DepartureTime:
    """Parse an ``HH:MM`` string into a DepartureTime.

    Raises:
        MalformedTimeError: If the value is not two colon-separated numbers or
            the hour/minute is out of range.
    """
    if not isinstance(value, str):
        raise MalformedTimeError(value, "not a string")
    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        raise MalformedTimeError(value)
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23:
        raise MalformedTimeError(value, f"hour {hour} out of range 0-23")
    if minute > 59:
        raise MalformedTimeError(value, f"minute {minute} out of range 0-59")
    return DepartureTime(hour=hour, minute=minute)


def parse_time(value: str) -> int:
    """Parse an ``HH:MM`` string into minutes since midnight."""
    return parse_departure_time(value).time_in_minutes


def compare_times(a: str, b: str) -> int:
    """Compare two ``HH:MM`` strings, returning -1, 0 or 1."""
    left, right = parse_time(a), parse_time(b)
    return (left > right) - (left < right)


def classify_day_type(day: date) -> DayType:
    """Map a calendar date to its schedule day-type.

    Public holidays are not recognised; they follow their weekday.
    """
    weekday = day.weekday()  # Monday == 0
    if weekday == 6:
        return DayType.SUNDAY
    if weekday == 5:
        return DayType.SATURDAY
    return DayType.WEEKDAY
