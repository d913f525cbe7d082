"""Contracts (protocols) between the core and its collaborators."""

from transit_timetable.domain.contracts.clock import Clock
from transit_timetable.domain.contracts.refresh_scheduler import (
    RefreshHandleProtocol,
    RefreshSchedulerProtocol,
)
from transit_timetable.domain.contracts.rendering_bridge import RenderingBridgeProtocol

__all__ = [
    "Clock",
    "RefreshHandleProtocol",
    "RefreshSchedulerProtocol",
    "RenderingBridgeProtocol",
]
