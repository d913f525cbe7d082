"""Classified schedule domain models handed to the rendering bridge."""

from dataclasses import dataclass, field
from enum import StrEnum

from transit_timetable.domain.models.aggregated_schedule import AggregatedSchedule
from transit_timetable.domain.models.departure_time import DepartureTime
from transit_timetable.domain.models.view_selection import ViewSelection


class DepartureStatus(StrEnum):
    """Status of a departure relative to the current time."""

    PAST = "past"
    NEXT = "next"
    UPCOMING = "upcoming"


@dataclass(frozen=True)
class ClassifiedDeparture:
    """A departure together with its status."""

    time: DepartureTime
    status: DepartureStatus


@dataclass(frozen=True)
class HourRow:
    """One hour of the hours/minutes table."""

    hour: int
    is_current_hour: bool
    departures: list[ClassifiedDeparture]


@dataclass(frozen=True)
class ClassifiedSchedule:
    """Everything needed to draw one timetable view deterministically."""

    line_id: str
    selection: ViewSelection
    schedule: AggregatedSchedule
    next_departure: DepartureTime | None
    is_rollover: bool
    current_hour: int
    focus_hour: int | None
    departures: list[ClassifiedDeparture] = field(default_factory=list)
    rows: list[HourRow] = field(default_factory=list)

    @property
    def next_classified(self) -> ClassifiedDeparture | None:
        """The departure classified as next, if any."""
        for departure in self.departures:
            if departure.status is DepartureStatus.NEXT:
                return departure
        return None
