"""Timetable scheduling and live departure highlighting for a city bus network."""

__version__ = "0.1.0"
