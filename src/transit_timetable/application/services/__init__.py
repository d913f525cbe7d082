"""Application services for timetable scheduling and highlighting."""

from transit_timetable.application.services.departure_aggregator import DepartureAggregator
from transit_timetable.application.services.highlight_classifier import (
    classify_departures,
    find_focus_hour,
    group_rows,
    is_rollover,
)
from transit_timetable.application.services.line_catalog import (
    LineCatalog,
    compare_line_ids,
    line_sort_key,
)
from transit_timetable.application.services.next_departure_resolver import (
    resolve_next_departure,
)
from transit_timetable.application.services.time_utils import (
    classify_day_type,
    compare_times,
    parse_departure_time,
    parse_time,
)
from transit_timetable.application.services.timetable_session import (
    TimetableSession,
    classify_schedule,
)
from transit_timetable.application.services.view_selection_machine import ViewSelectionMachine

__all__ = [
    "DepartureAggregator",
    "LineCatalog",
    "TimetableSession",
    "ViewSelectionMachine",
    "classify_day_type",
    "classify_departures",
    "classify_schedule",
    "compare_line_ids",
    "compare_times",
    "find_focus_hour",
    "group_rows",
    "is_rollover",
    "line_sort_key",
    "parse_departure_time",
    "parse_time",
    "resolve_next_departure",
]
