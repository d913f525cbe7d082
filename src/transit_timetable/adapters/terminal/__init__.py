"""Terminal rendering adapters."""

from transit_timetable.adapters.terminal.text_renderer import TextTimetableRenderer

__all__ = ["TextTimetableRenderer"]
