"""Refresh scheduling adapters."""

from transit_timetable.adapters.scheduling.asyncio_refresh_scheduler import (
    AsyncioRefreshScheduler,
    RefreshHandle,
)

__all__ = ["AsyncioRefreshScheduler", "RefreshHandle"]
