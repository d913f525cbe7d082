"""Protocols for the periodic refresh of departure highlighting."""

from collections.abc import Callable
from typing import Protocol


class RefreshHandleProtocol(Protocol):
    """Opaque handle to a pending periodic refresh."""

    @property
    def active(self) -> bool:
        """Whether the refresh is still scheduled."""
        ...

    def cancel(self) -> None:
        """Cancel the pending refresh."""
        ...


class RefreshSchedulerProtocol(Protocol):
    """Re-runs a step on a fixed cadence, holding at most one live handle."""

    def arm(self, step: Callable[[], object], interval_seconds: float) -> RefreshHandleProtocol:
        """Run ``step`` now, then every ``interval_seconds``.

        Any previously armed refresh is disarmed first.
        """
        ...

    def disarm(self) -> None:
        """Cancel the pending refresh, if any. Idempotent."""
        ...
