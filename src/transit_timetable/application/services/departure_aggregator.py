"""Aggregation of per-station departure times into one schedule."""

import logging
from functools import cmp_to_key

from transit_timetable.application.services.time_utils import compare_times, parse_departure_time
from transit_timetable.domain.errors import MalformedTimeError, TimetableDataError
from transit_timetable.domain.models import (
    AggregatedSchedule,
    DayType,
    DepartureTime,
    Direction,
    TimetableEntry,
)

logger = logging.getLogger(__name__)


class DepartureAggregator:
    """Builds the deduplicated, hour-grouped schedule of one timetable slice."""

    def aggregate(
        self, entry: TimetableEntry, day_type: DayType, direction: Direction
    ) -> AggregatedSchedule:
        """Aggregate the departures of ``entry`` for one (day-type, direction).

        Times listed at several stations collapse to a single departure. The
        result does not depend on station order.

        Raises:
            TimetableDataError: If a station lists a malformed time.
        """
        day_type = DayType(day_type)
        direction = Direction(direction)

        # Exact-string dedup first, remembering where each string came from
        sources: dict[str, str] = {}
        for station in entry.stations:
            for raw_time in station.times.for_slice(day_type, direction):
                sources.setdefault(raw_time, station.name)

        # "7:05" and "07:05" are the same instant; keep one canonical label
        by_minute: dict[int, DepartureTime] = {}
        for raw_time, station_name in sources.items():
            try:
                departure = parse_departure_time(raw_time)
            except MalformedTimeError as e:
                raise TimetableDataError(
                    raw_time,
                    line_id=entry.line_id,
                    station_name=station_name,
                    day_type=day_type.value,
                    direction=direction.value,
                    reason=e.reason,
                ) from e
            by_minute.setdefault(departure.time_in_minutes, departure)

        sorted_departures = sorted(
            (departure.label for departure in by_minute.values()), key=cmp_to_key(compare_times)
        )

        departures_by_hour: dict[str, list[str]] = {}
        for label in sorted_departures:
            hour, minute = label.split(":")
            departures_by_hour.setdefault(str(int(hour)), []).append(minute)
        for minutes in departures_by_hour.values():
            minutes.sort(key=int)

        logger.debug(
            f"Aggregated line {entry.line_id} {day_type.value}/{direction.value}: "
            f"{len(sources)} distinct strings -> {len(sorted_departures)} departures"
        )

        return AggregatedSchedule(
            day_type=day_type,
            direction=direction,
            departures_by_hour=departures_by_hour,
            sorted_departures=sorted_departures,
            departure_times=sorted(by_minute.values()),
        )
