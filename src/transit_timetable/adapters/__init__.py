"""Adapters layer - external system integrations."""

from transit_timetable.adapters.config import AppConfig, LineTypeConfigurationLoader
from transit_timetable.adapters.json_timetable_repository import JsonTimetableRepository
from transit_timetable.adapters.scheduling import AsyncioRefreshScheduler, RefreshHandle
from transit_timetable.adapters.terminal import TextTimetableRenderer

__all__ = [
    "AppConfig",
    "AsyncioRefreshScheduler",
    "JsonTimetableRepository",
    "LineTypeConfigurationLoader",
    "RefreshHandle",
    "TextTimetableRenderer",
]
