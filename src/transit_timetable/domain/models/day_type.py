"""Day-type and direction enums."""

from enum import StrEnum


class DayType(StrEnum):
    """The three schedule variants a line may have."""

    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class Direction(StrEnum):
    """One of the two travel directions of a line."""

    A = "a"
    B = "b"

    @property
    def index(self) -> int:
        """Position of this direction in a station's ``[directionA, directionB]`` pair."""
        return 0 if self is Direction.A else 1

    @property
    def other(self) -> "Direction":
        """The opposite direction."""
        return Direction.B if self is Direction.A else Direction.A

    @classmethod
    def from_index(cls, index: int) -> "Direction":
        """Return the direction stored at ``index`` (0 or 1)."""
        if index == 0:
            return cls.A
        if index == 1:
            return cls.B
        raise ValueError(f"Direction index must be 0 or 1, got {index}")
