"""Ports (interfaces) for the ports-and-adapters architecture."""

from transit_timetable.domain.ports.timetable_repository import TimetableRepository

__all__ = ["TimetableRepository"]
