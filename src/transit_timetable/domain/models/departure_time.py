"""Departure time value object."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class DepartureTime:
    """A time of day at which a bus departs.

    Also used for the resolved next departure, which has the same
    ``{hour, minute}`` shape.
    """

    hour: int
    minute: int

    @property
    def time_in_minutes(self) -> int:
        """Minutes since midnight."""
        return self.hour * 60 + self.minute

    @property
    def label(self) -> str:
        """Canonical ``HH:MM`` representation."""
        return f"{self.hour:02d}:{self.minute:02d}"
