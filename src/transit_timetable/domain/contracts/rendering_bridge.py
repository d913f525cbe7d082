"""Protocol for the presentation side of a timetable."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from transit_timetable.domain.models.classified_schedule import ClassifiedSchedule
    from transit_timetable.domain.models.timetable_entry import TimetableEntry
    from transit_timetable.domain.models.view_selection import ViewSelection


class RenderingBridgeProtocol(Protocol):
    """Turns classified schedules into a presentation surface."""

    def view_changed(self, entry: "TimetableEntry", selection: "ViewSelection") -> None:
        """Show the table of ``selection`` and update the active day/direction controls.

        Args:
            entry: The timetable being displayed.
            selection: The newly active (day-type, direction) pair.
        """
        ...

    def render(self, schedule: "ClassifiedSchedule") -> None:
        """Draw the classified departures of the active view.

        Args:
            schedule: Grouped departures with their past/next/upcoming status.
        """
        ...

    def language_changed(self, language: str) -> None:
        """Switch display labels to ``language``.

        Args:
            language: Language code ("en" or "bhs").
        """
        ...
