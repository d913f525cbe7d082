"""Allow running the package with ``python -m transit_timetable``."""

from transit_timetable.main import run

run()
