"""State machine for the displayed (day-type, direction) slice."""

import logging
from collections.abc import Callable
from datetime import date

from transit_timetable.application.services.time_utils import classify_day_type
from transit_timetable.domain.models import DayType, Direction, ViewSelection

logger = logging.getLogger(__name__)

ViewChangeListener = Callable[[ViewSelection], None]


class ViewSelectionMachine:
    """Tracks which of the six (day-type, direction) states is active.

    Every state is reachable from every other in one step. There is no
    terminal state; a new machine is created for each loaded timetable.
    """

    def __init__(self, initial: ViewSelection) -> None:
        """Initialize the machine.

        Args:
            initial: Starting selection, e.g. one requested by a map click.
        """
        self._selection = initial
        self._listeners: list[ViewChangeListener] = []

    @classmethod
    def for_date(cls, today: date) -> "ViewSelectionMachine":
        """Create a machine starting at today's day-type and direction A."""
        return cls(ViewSelection(day_type=classify_day_type(today), direction=Direction.A))

    @property
    def selection(self) -> ViewSelection:
        return self._selection

    def subscribe(self, listener: ViewChangeListener) -> Callable[[], None]:
        """Call ``listener`` after every transition. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def select_day_type(self, day_type: DayType | str) -> ViewSelection:
        """Switch the day-type, keeping the direction."""
        return self._transition(self._selection.with_day_type(DayType(day_type)))

    def select_direction(self, direction: Direction | str) -> ViewSelection:
        """Switch the direction, keeping the day-type."""
        return self._transition(self._selection.with_direction(Direction(direction)))

    def swap_direction(self) -> ViewSelection:
        """Switch to the other direction."""
        return self.select_direction(self._selection.direction.other)

    def _transition(self, selection: ViewSelection) -> ViewSelection:
        logger.debug(
            f"View selection {self._selection.day_type.value}/{self._selection.direction.value} "
            f"-> {selection.day_type.value}/{selection.direction.value}"
        )
        self._selection = selection
        for listener in list(self._listeners):
            listener(selection)
        return selection
