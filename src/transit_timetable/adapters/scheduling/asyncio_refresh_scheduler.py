"""Refresh scheduler running on the asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from transit_timetable.domain.contracts.refresh_scheduler import (
    RefreshHandleProtocol,
    RefreshSchedulerProtocol,
)

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class RefreshHandle(RefreshHandleProtocol):
    """Handle to one armed refresh loop."""

    def __init__(self, task: asyncio.Task[None], interval_seconds: float) -> None:
        self._task = task
        self.interval_seconds = interval_seconds
        self._cancelled = False

    @property
    def active(self) -> bool:
        return not self._cancelled and not self._task.done()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def failure(self) -> BaseException | None:
        """The exception that stopped the loop, if a tick failed."""
        if not self._task.done() or self._task.cancelled():
            return None
        return self._task.exception()

    def cancel(self) -> None:
        self._cancelled = True
        self._task.cancel()

    async def wait(self) -> None:
        """Wait until the loop ends; re-raises the failure that stopped it."""
        try:
            await self._task
        except asyncio.CancelledError:
            if not self._cancelled:
                raise
            logger.debug("Refresh loop finished after cancellation")


class AsyncioRefreshScheduler(RefreshSchedulerProtocol):
    """Re-runs a step on a fixed cadence; at most one loop is armed at a time."""

    def __init__(self) -> None:
        self._handle: RefreshHandle | None = None

    @property
    def handle(self) -> RefreshHandle | None:
        return self._handle

    @property
    def live_handles(self) -> int:
        return 1 if self._handle is not None and self._handle.active else 0

    def arm(self, step: Callable[[], object], interval_seconds: float) -> RefreshHandle:
        """Run ``step`` immediately, then every ``interval_seconds``.

        Must be called from a running event loop. Errors of the immediate run
        propagate to the caller and nothing is armed; a failing later tick
        stops the loop.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        loop = asyncio.get_running_loop()
        self.disarm()

        step()

        task = loop.create_task(self._repeat(step, interval_seconds))
        task.add_done_callback(self._log_failure)
        self._handle = RefreshHandle(task, interval_seconds)
        logger.debug(f"Armed refresh every {interval_seconds}s")
        return self._handle

    def disarm(self) -> None:
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        logger.debug("Disarmed refresh")

    async def _repeat(self, step: Callable[[], object], interval_seconds: float) -> None:
        try:
            while True:
                await asyncio.sleep(interval_seconds)
                step()
        except asyncio.CancelledError:
            logger.debug("Refresh loop cancelled")
            raise

    @staticmethod
    def _log_failure(task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Highlighting refresh stopped after a failed tick", exc_info=error)
