"""Resolution of the next departure relative to the current time."""

from collections.abc import Mapping, Sequence

from transit_timetable.domain.models.departure_time import DepartureTime


def resolve_next_departure(
    departures_by_hour: Mapping[str, Sequence[str]], now_hour: int, now_minute: int
) -> DepartureTime | None:
    """Find the first departure at or after ``now_hour:now_minute``.

    A departure at exactly the current minute still counts as next.

    Returns:
        The next departure today, or None when every departure of the day has
        passed (or there are none). Rolling over to tomorrow's first departure
        is left to the classifier.
    """
    for hour_key in sorted(departures_by_hour, key=int):
        hour = int(hour_key)
        if hour < now_hour:
            continue
        minutes = sorted(int(minute) for minute in departures_by_hour[hour_key])
        if not minutes:
            continue
        if hour > now_hour:
            return DepartureTime(hour=hour, minute=minutes[0])
        for minute in minutes:
            if minute >= now_minute:
                return DepartureTime(hour=hour, minute=minute)
        # Every departure of the current hour has passed
    return None
