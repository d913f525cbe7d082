"""Lifecycle of one rendered timetable: selection, classification and refresh."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from transit_timetable.application.services.departure_aggregator import DepartureAggregator
from transit_timetable.application.services.highlight_classifier import (
    classify_departures,
    find_focus_hour,
    group_rows,
    is_rollover,
)
from transit_timetable.application.services.next_departure_resolver import (
    resolve_next_departure,
)
from transit_timetable.application.services.view_selection_machine import ViewSelectionMachine
from transit_timetable.domain.models import ClassifiedSchedule, DayType, Direction

if TYPE_CHECKING:
    from collections.abc import Callable

    from transit_timetable.domain.contracts import (
        Clock,
        RefreshHandleProtocol,
        RefreshSchedulerProtocol,
        RenderingBridgeProtocol,
    )
    from transit_timetable.domain.models import (
        AggregatedSchedule,
        TimetableEntry,
        ViewSelection,
    )

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL_SECONDS = 60.0


def classify_schedule(
    line_id: str, selection: ViewSelection, schedule: AggregatedSchedule, now: datetime
) -> ClassifiedSchedule:
    """Resolve the next departure and classify every departure of ``schedule``."""
    now_in_minutes = now.hour * 60 + now.minute
    next_departure = resolve_next_departure(schedule.departures_by_hour, now.hour, now.minute)
    departures = classify_departures(schedule.departure_times, next_departure, now_in_minutes)
    rows = group_rows(departures, now.hour)
    return ClassifiedSchedule(
        line_id=line_id,
        selection=selection,
        schedule=schedule,
        next_departure=next_departure,
        is_rollover=is_rollover(schedule.departure_times, next_departure, now_in_minutes),
        current_hour=now.hour,
        focus_hour=find_focus_hour(rows, now.hour),
        departures=departures,
        rows=rows,
    )


class TimetableSession:
    """Owns the state of the currently rendered timetable.

    Holds the loaded entry, its view-selection machine, the aggregated slice
    and the single refresh handle. Loading another line retires the previous
    handle before a new one is armed.
    """

    def __init__(
        self,
        scheduler: RefreshSchedulerProtocol,
        bridge: RenderingBridgeProtocol | None = None,
        clock: Clock = datetime.now,
        aggregator: DepartureAggregator | None = None,
        refresh_interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS,
    ) -> None:
        """Initialize the session.

        Args:
            scheduler: Scheduler that re-runs classification periodically.
            bridge: Optional presentation adapter notified of every change.
            clock: Returns the current local time.
            aggregator: Departure aggregator (injectable for tests).
            refresh_interval_seconds: Cadence of the highlighting refresh.
        """
        if refresh_interval_seconds <= 0:
            raise ValueError("refresh_interval_seconds must be positive")
        self._scheduler = scheduler
        self._bridge = bridge
        self._clock = clock
        self._aggregator = aggregator or DepartureAggregator()
        self._refresh_interval_seconds = refresh_interval_seconds
        self._entry: TimetableEntry | None = None
        self._machine: ViewSelectionMachine | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._schedule: AggregatedSchedule | None = None
        self._result: ClassifiedSchedule | None = None
        self._pending: tuple[ViewSelection, AggregatedSchedule] | None = None
        self._handle: RefreshHandleProtocol | None = None

    @property
    def entry(self) -> TimetableEntry | None:
        return self._entry

    @property
    def selection(self) -> ViewSelection | None:
        return self._machine.selection if self._machine is not None else None

    @property
    def schedule(self) -> AggregatedSchedule | None:
        return self._schedule

    @property
    def result(self) -> ClassifiedSchedule | None:
        """The most recent classification."""
        return self._result

    @property
    def refresh_handle(self) -> RefreshHandleProtocol | None:
        return self._handle

    def load(
        self, entry: TimetableEntry, selection: ViewSelection | None = None
    ) -> ClassifiedSchedule:
        """Render ``entry`` and start keeping its highlighting current.

        Args:
            entry: Timetable of the line to show.
            selection: Initial (day-type, direction); defaults to today's
                day-type and direction A.

        Returns:
            The initial classification.

        Raises:
            TimetableDataError: If the initial slice holds a malformed time.
                The previously loaded line stays loaded and armed.
        """
        if selection is None:
            machine = ViewSelectionMachine.for_date(self._clock().date())
        else:
            machine = ViewSelectionMachine(selection)

        logger.info(
            f"Loading timetable for line {entry.line_id} "
            f"({machine.selection.day_type.value}/{machine.selection.direction.value})"
        )
        schedule = self._aggregate(entry, machine.selection)

        self.close()
        self._entry = entry
        self._machine = machine
        self._schedule = schedule
        self._result = None
        self._pending = None
        self._unsubscribe = machine.subscribe(self._on_view_changed)
        if self._bridge is not None:
            self._bridge.view_changed(entry, machine.selection)
        self._handle = self._scheduler.arm(self.refresh, self._refresh_interval_seconds)
        return self._require_result()

    def refresh(self) -> ClassifiedSchedule:
        """Reclassify the active slice against the current time."""
        if self._entry is None or self._machine is None or self._schedule is None:
            raise RuntimeError("No timetable loaded")
        self._result = classify_schedule(
            self._entry.line_id, self._machine.selection, self._schedule, self._clock()
        )
        if self._bridge is not None:
            self._bridge.render(self._result)
        return self._result

    def select_day_type(self, day_type: DayType | str) -> ClassifiedSchedule:
        machine = self._require_machine()
        self._prepare(machine.selection.with_day_type(DayType(day_type)))
        machine.select_day_type(day_type)
        return self._require_result()

    def select_direction(self, direction: Direction | str) -> ClassifiedSchedule:
        machine = self._require_machine()
        self._prepare(machine.selection.with_direction(Direction(direction)))
        machine.select_direction(direction)
        return self._require_result()

    def swap_direction(self) -> ClassifiedSchedule:
        machine = self._require_machine()
        self._prepare(machine.selection.with_direction(machine.selection.direction.other))
        machine.swap_direction()
        return self._require_result()

    def language_changed(self, language: str) -> None:
        """Re-emit the current view so the bridge can relabel it.

        Selection and classification are language-independent and are kept.
        """
        if self._bridge is None:
            return
        self._bridge.language_changed(language)
        if self._entry is not None and self._machine is not None:
            self._bridge.view_changed(self._entry, self._machine.selection)
        if self._result is not None:
            self._bridge.render(self._result)

    def close(self) -> None:
        """Disarm the refresh and detach from the current selection machine."""
        self._scheduler.disarm()
        if self._handle is not None:
            logger.debug("Disarmed highlighting refresh")
        self._handle = None
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _prepare(self, selection: ViewSelection) -> None:
        """Aggregate the slice of ``selection`` before the machine commits to it."""
        if self._entry is None:
            raise RuntimeError("No timetable loaded")
        self._pending = (selection, self._aggregate(self._entry, selection))

    def _on_view_changed(self, selection: ViewSelection) -> None:
        if self._entry is None:
            raise RuntimeError("No timetable loaded")
        pending, self._pending = self._pending, None
        if pending is not None and pending[0] == selection:
            self._schedule = pending[1]
        else:
            self._schedule = self._aggregate(self._entry, selection)
        if self._bridge is not None:
            self._bridge.view_changed(self._entry, selection)
        # Reclassify right away instead of waiting for the next tick
        self.refresh()

    def _aggregate(self, entry: TimetableEntry, selection: ViewSelection) -> AggregatedSchedule:
        return self._aggregator.aggregate(entry, selection.day_type, selection.direction)

    def _require_machine(self) -> ViewSelectionMachine:
        if self._machine is None:
            raise RuntimeError("No timetable loaded")
        return self._machine

    def _require_result(self) -> ClassifiedSchedule:
        if self._result is None:
            raise RuntimeError("Timetable has not been classified yet")
        return self._result
