"""Rendering bridge that draws timetables as plain text."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from transit_timetable.adapters.terminal.labels import label
from transit_timetable.domain.contracts.rendering_bridge import RenderingBridgeProtocol
from transit_timetable.domain.models import DayType, DepartureStatus, Direction

if TYPE_CHECKING:
    from transit_timetable.domain.models import (
        ClassifiedDeparture,
        ClassifiedSchedule,
        TimetableEntry,
        ViewSelection,
    )


def format_minute(departure: ClassifiedDeparture) -> str:
    """Mark a minute by status: ``(05)`` past, ``[05]`` next, `` 05 `` upcoming."""
    minute = f"{departure.time.minute:02d}"
    if departure.status is DepartureStatus.PAST:
        return f"({minute})"
    if departure.status is DepartureStatus.NEXT:
        return f"[{minute}]"
    return f" {minute} "


class TextTimetableRenderer(RenderingBridgeProtocol):
    """Writes the active timetable view to a text stream."""

    def __init__(self, language: str = "en", stream: TextIO | None = None) -> None:
        """Initialize the renderer.

        Args:
            language: Label language ("en" or "bhs").
            stream: Output stream; defaults to stdout.
        """
        self.language = language
        self._stream = stream
        self._entry: TimetableEntry | None = None
        self._selection: ViewSelection | None = None
        self.last_output = ""

    def view_changed(self, entry: TimetableEntry, selection: ViewSelection) -> None:
        self._entry = entry
        self._selection = selection

    def language_changed(self, language: str) -> None:
        self.language = language

    def render(self, schedule: ClassifiedSchedule) -> None:
        self.last_output = self.format(schedule)
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(self.last_output + "\n")
        stream.flush()

    def format(self, schedule: ClassifiedSchedule) -> str:
        """Render ``schedule`` as a header, controls and an hours/minutes table."""
        lines: list[str] = []
        lines.extend(self._format_header(schedule))

        if not schedule.rows:
            lines.append(label(self.language, "no_departures"))
            return "\n".join(lines)

        hour_title = label(self.language, "hour")
        width = max(len(hour_title), 2)
        lines.append(f"  {hour_title:<{width}} | {label(self.language, 'minutes')}")
        for row in schedule.rows:
            marker = ">" if row.is_current_hour else " "
            minutes = " ".join(format_minute(departure) for departure in row.departures)
            lines.append(f"{marker} {row.hour:02d}{'':<{width - 2}} | {minutes}")

        next_classified = schedule.next_classified
        if next_classified is not None:
            suffix = f" ({label(self.language, 'tomorrow')})" if schedule.is_rollover else ""
            lines.append(f"{label(self.language, 'next')}: {next_classified.time.label}{suffix}")
        return "\n".join(lines)

    def _format_header(self, schedule: ClassifiedSchedule) -> list[str]:
        entry = self._entry
        selection = schedule.selection
        lines: list[str] = []
        if entry is not None:
            name = entry.line_name.get(self.language)
            lines.append(f"{label(self.language, 'line')} {entry.line_id}: {name}")
            directions = [
                self._active(
                    entry.directions.label(direction, self.language),
                    direction == selection.direction,
                )
                for direction in Direction
            ]
            lines.append(f"{label(self.language, 'relation')}: {' / '.join(directions)}")
        days = [
            self._active(label(self.language, day_type.value), day_type == selection.day_type)
            for day_type in DayType
        ]
        lines.append(f"{label(self.language, 'timetable_for')}: {'  '.join(days)}")
        if entry is not None and entry.notes is not None and entry.notes.get(self.language):
            lines.append(f"{label(self.language, 'notes')} {entry.notes.get(self.language)}")
        return lines

    @staticmethod
    def _active(text: str, is_active: bool) -> str:
        return f"*{text}*" if is_active else text
