"""Aggregated schedule domain model."""

from dataclasses import dataclass, field

from transit_timetable.domain.models.day_type import DayType, Direction
from transit_timetable.domain.models.departure_time import DepartureTime


@dataclass(frozen=True)
class AggregatedSchedule:
    """Deduplicated, sorted departures of one (entry, day-type, direction) slice.

    Always rebuilt from the station times, never mutated in place.
    """

    day_type: DayType
    direction: Direction
    departures_by_hour: dict[str, list[str]] = field(default_factory=dict)  # "7" -> ["05", "35"]
    sorted_departures: list[str] = field(default_factory=list)  # ["07:05", "07:35"]
    departure_times: list[DepartureTime] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.sorted_departures
