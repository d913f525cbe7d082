"""Protocol for the wall clock."""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Returns the current local date and time.

    Injected everywhere "now" is needed so tests can supply fixed times.
    """

    def __call__(self) -> datetime:
        ...
