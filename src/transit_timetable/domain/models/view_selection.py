"""View selection domain model."""

from dataclasses import dataclass, replace

from transit_timetable.domain.models.day_type import DayType, Direction


@dataclass(frozen=True)
class ViewSelection:
    """The (day-type, direction) slice of a timetable that is displayed."""

    day_type: DayType
    direction: Direction = Direction.A

    def with_day_type(self, day_type: DayType) -> "ViewSelection":
        return replace(self, day_type=DayType(day_type))

    def with_direction(self, direction: Direction) -> "ViewSelection":
        return replace(self, direction=Direction(direction))
