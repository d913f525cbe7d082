"""Timetable repository port."""

from typing import Protocol

from transit_timetable.domain.models.line_type_configuration import LineTypeConfiguration
from transit_timetable.domain.models.timetable_entry import TimetableEntry


class TimetableRepository(Protocol):
    """Port for retrieving timetable entries."""

    async def load_line_type(self, line_type: LineTypeConfiguration) -> list[TimetableEntry]:
        """Load all timetable entries of one line type."""
        ...
