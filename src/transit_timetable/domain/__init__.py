"""Domain layer - core timetable models, contracts and errors."""

from transit_timetable.domain.errors import (
    MalformedTimeError,
    TimetableDataError,
    TimetableError,
    TimetableNotFoundError,
    TimetableSourceError,
)
from transit_timetable.domain.models import (
    DayType,
    Direction,
    TimetableEntry,
    ViewSelection,
)
from transit_timetable.domain.ports import TimetableRepository

__all__ = [
    "DayType",
    "Direction",
    "MalformedTimeError",
    "TimetableDataError",
    "TimetableEntry",
    "TimetableError",
    "TimetableNotFoundError",
    "TimetableRepository",
    "TimetableSourceError",
    "ViewSelection",
]
