"""Application layer - timetable use cases."""
