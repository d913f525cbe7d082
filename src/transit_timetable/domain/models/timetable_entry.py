"""Timetable entry domain models (parsed from the timetable JSON files)."""

from pydantic import BaseModel, ConfigDict, Field

from transit_timetable.domain.models.bilingual_text import BilingualText, DirectionLabels
from transit_timetable.domain.models.day_type import DayType, Direction


class StationTimes(BaseModel):
    """Departure times of one station: ``[directionA, directionB]`` per day-type.

    Time strings are kept verbatim; they are parsed (and rejected if
    malformed) when a slice is aggregated.
    """

    model_config = ConfigDict(frozen=True)

    weekday: tuple[list[str], list[str]]
    saturday: tuple[list[str], list[str]]
    sunday: tuple[list[str], list[str]]

    def for_slice(self, day_type: DayType, direction: Direction) -> list[str]:
        """Return the raw times for one (day-type, direction) slice."""
        pair: tuple[list[str], list[str]] = getattr(self, DayType(day_type).value)
        return pair[Direction(direction).index]


class Station(BaseModel):
    """One stop of a line and its departure times."""

    model_config = ConfigDict(frozen=True)

    name: str
    times: StationTimes


class TimetableEntry(BaseModel):
    """One bus line's full schedule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    line_id: str = Field(alias="lineId", min_length=1)
    line_name: BilingualText = Field(alias="lineName")
    directions: DirectionLabels
    stations: list[Station] = Field(min_length=1)
    notes: BilingualText | None = None
    line_type: str = Field(default="urban", alias="lineType")
