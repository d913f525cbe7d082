"""Shared fixtures and test doubles."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

from transit_timetable.domain.models import (
    ClassifiedSchedule,
    TimetableEntry,
    ViewSelection,
)

EMPTY_TIMES: dict[str, list[list[str]]] = {
    "weekday": [[], []],
    "saturday": [[], []],
    "sunday": [[], []],
}


def make_station(name: str, **times: list[list[str]]) -> dict[str, Any]:
    """Build raw station data; unspecified day-types have no departures."""
    return {"name": name, "times": {**EMPTY_TIMES, **times}}


def make_entry(
    line_id: str = "1", stations: list[dict[str, Any]] | None = None, **extra: Any
) -> TimetableEntry:
    """Build a timetable entry from raw JSON-shaped data."""
    data: dict[str, Any] = {
        "lineId": line_id,
        "lineName": {"en": f"Line {line_id}", "bhs": f"Linija {line_id}"},
        "directions": {"en": ["Centar", "Terminus"], "bhs": ["Centar", "Okretnica"]},
        "stations": stations if stations is not None else [make_station("Centar")],
        **extra,
    }
    return TimetableEntry.model_validate(data)


class FixedClock:
    """Clock returning a settable time."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class FakeHandle:
    """Refresh handle that never fires on its own."""

    def __init__(self) -> None:
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False


class FakeScheduler:
    """Synchronous refresh scheduler; ticks are driven by the test."""

    def __init__(self) -> None:
        self.handles: list[FakeHandle] = []
        self.step: Callable[[], object] | None = None
        self.interval_seconds: float | None = None

    def arm(self, step: Callable[[], object], interval_seconds: float) -> FakeHandle:
        self.disarm()
        step()
        self.step = step
        self.interval_seconds = interval_seconds
        handle = FakeHandle()
        self.handles.append(handle)
        return handle

    def disarm(self) -> None:
        for handle in self.handles:
            handle.cancel()
        self.step = None

    @property
    def live_handles(self) -> int:
        return sum(1 for handle in self.handles if handle.active)

    def tick(self) -> None:
        if self.step is not None:
            self.step()


class RecordingBridge:
    """Rendering bridge that records every call."""

    def __init__(self) -> None:
        self.views: list[tuple[str, ViewSelection]] = []
        self.rendered: list[ClassifiedSchedule] = []
        self.languages: list[str] = []

    def view_changed(self, entry: TimetableEntry, selection: ViewSelection) -> None:
        self.views.append((entry.line_id, selection))

    def render(self, schedule: ClassifiedSchedule) -> None:
        self.rendered.append(schedule)

    def language_changed(self, language: str) -> None:
        self.languages.append(language)


@pytest.fixture
def monday_morning() -> FixedClock:
    """2024-01-15 is a Monday."""
    return FixedClock(datetime(2024, 1, 15, 7, 15))


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def bridge() -> RecordingBridge:
    return RecordingBridge()
