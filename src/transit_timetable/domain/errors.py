"""Exception taxonomy for timetable processing."""


class TimetableError(Exception):
    """Base class for all timetable errors."""


class MalformedTimeError(TimetableError, ValueError):
    """Raised when a departure time string is not a valid ``HH:MM`` value."""

    def __init__(self, value: object, reason: str = "expected 'HH:MM'") -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed time {value!r}: {reason}")


class TimetableDataError(MalformedTimeError):
    """A station of a timetable entry lists a malformed departure time.

    Raised by the aggregator so that bad source data can be told apart from a
    slice that simply has no departures.
    """

    def __init__(
        self,
        value: object,
        *,
        line_id: str,
        station_name: str,
        day_type: str,
        direction: str,
        reason: str = "expected 'HH:MM'",
    ) -> None:
        self.line_id = line_id
        self.station_name = station_name
        self.day_type = day_type
        self.direction = direction
        super().__init__(
            value,
            f"{reason} (line {line_id}, station {station_name!r}, {day_type}/{direction})",
        )


class TimetableNotFoundError(TimetableError, LookupError):
    """Raised when no timetable exists for a requested line."""

    def __init__(self, line_id: str) -> None:
        self.line_id = line_id
        super().__init__(f"Timetable not found for line {line_id!r}")


class TimetableSourceError(TimetableError):
    """Raised when a timetable file or URL cannot be read or decoded."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load timetables from {source}: {reason}")
