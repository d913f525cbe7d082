"""Domain models for bus timetables."""

from transit_timetable.domain.models.aggregated_schedule import AggregatedSchedule
from transit_timetable.domain.models.bilingual_text import BilingualText, DirectionLabels
from transit_timetable.domain.models.classified_schedule import (
    ClassifiedDeparture,
    ClassifiedSchedule,
    DepartureStatus,
    HourRow,
)
from transit_timetable.domain.models.day_type import DayType, Direction
from transit_timetable.domain.models.departure_time import DepartureTime
from transit_timetable.domain.models.line_type_configuration import LineTypeConfiguration
from transit_timetable.domain.models.timetable_entry import Station, StationTimes, TimetableEntry
from transit_timetable.domain.models.view_selection import ViewSelection

__all__ = [
    "AggregatedSchedule",
    "BilingualText",
    "ClassifiedDeparture",
    "ClassifiedSchedule",
    "DayType",
    "DepartureStatus",
    "DepartureTime",
    "Direction",
    "DirectionLabels",
    "HourRow",
    "LineTypeConfiguration",
    "Station",
    "StationTimes",
    "TimetableEntry",
    "ViewSelection",
]
