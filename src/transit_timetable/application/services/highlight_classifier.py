"""Classification of departures into past, next and upcoming."""

from collections.abc import Sequence

from transit_timetable.domain.models import (
    ClassifiedDeparture,
    DepartureStatus,
    DepartureTime,
    HourRow,
)


def is_rollover(
    departures: Sequence[DepartureTime],
    next_departure: DepartureTime | None,
    now_in_minutes: int,
) -> bool:
    """Whether today's service for the slice has ended.

    In that case the next departure a rider can catch is tomorrow's first one.
    """
    if not departures:
        return False
    return next_departure is None or all(
        departure.time_in_minutes < now_in_minutes for departure in departures
    )


def classify_departures(
    departures: Sequence[DepartureTime],
    next_departure: DepartureTime | None,
    now_in_minutes: int,
) -> list[ClassifiedDeparture]:
    """Assign a status to every departure.

    ``departures`` must be sorted by time of day. The result is a pure
    function of the arguments. Exactly one departure is classified next
    whenever the list is not empty; a duplicate of the next departure is
    classified upcoming.
    """
    rollover = is_rollover(departures, next_departure, now_in_minutes)
    target = departures[0] if rollover else next_departure
    next_assigned = False

    classified: list[ClassifiedDeparture] = []
    for departure in departures:
        if (
            not next_assigned
            and target is not None
            and departure.time_in_minutes == target.time_in_minutes
        ):
            status = DepartureStatus.NEXT
            next_assigned = True
        elif not rollover and departure.time_in_minutes < now_in_minutes:
            status = DepartureStatus.PAST
        else:
            status = DepartureStatus.UPCOMING
        classified.append(ClassifiedDeparture(time=departure, status=status))
    return classified


def group_rows(classified: Sequence[ClassifiedDeparture], current_hour: int) -> list[HourRow]:
    """Group classified departures into hour rows, flagging the current hour."""
    by_hour: dict[int, list[ClassifiedDeparture]] = {}
    for departure in classified:
        by_hour.setdefault(departure.time.hour, []).append(departure)
    return [
        HourRow(
            hour=hour,
            is_current_hour=hour == current_hour,
            departures=sorted(by_hour[hour], key=lambda d: d.time.minute),
        )
        for hour in sorted(by_hour)
    ]


def find_focus_hour(rows: Sequence[HourRow], current_hour: int) -> int | None:
    """Pick the row a view should scroll to.

    The current hour if it has departures, else the first later hour, else the
    last hour of the day.
    """
    if not rows:
        return None
    for row in rows:
        if row.hour >= current_hour:
            return row.hour
    return rows[-1].hour
