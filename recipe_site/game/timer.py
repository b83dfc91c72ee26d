from __future__ import annotations

import asyncio
from typing import Callable, Protocol


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> Handle: ...


class AsyncioScheduler:
    """Schedules callbacks on whichever event loop is running at call time."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Handle:
        return asyncio.get_running_loop().call_later(delay, callback)


class PeriodicTask:
    """Repeats *callback* every *interval* seconds until cancelled."""

    def __init__(
        self,
        interval: float,
        callback: Callable[[], None],
        scheduler: Scheduler,
    ) -> None:
        self.interval = interval
        self._callback = callback
        self._scheduler = scheduler
        self._handle: Handle | None = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        if self._handle is None:
            self._handle = self._scheduler.call_later(self.interval, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        if self._handle is None:
            return
        # The callback may cancel us, in which case nothing is rescheduled
        self._handle = self._scheduler.call_later(self.interval, self._fire)
        self._callback()
