"""Single-timer debounce on top of a Tk-style scheduler."""
from __future__ import annotations

from typing import Any, Callable, Optional, Protocol


class Scheduler(Protocol):
    """The subset of the Tk widget API used for timers."""

    def after(self, ms: int, func: Callable[..., Any], *args: Any) -> str: ...

    def after_cancel(self, id: str) -> None: ...


class Debouncer:
    """
    Coalesce bursts of triggers into one delayed call.

    Each trigger cancels the pending call and schedules a new one with the
    latest arguments; nothing is queued.
    """

    def __init__(self, scheduler: Scheduler, delay_ms: int, callback: Callable[..., Any]) -> None:
        self._scheduler = scheduler
        self._delay_ms = int(delay_ms)
        self._callback = callback
        self._after_id: Optional[str] = None

    @property
    def pending(self) -> bool:
        return self._after_id is not None

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    def trigger(self, *args: Any) -> None:
        self.cancel()
        self._after_id = self._scheduler.after(self._delay_ms, self._fire, *args)

    def cancel(self) -> None:
        if self._after_id is not None:
            self._scheduler.after_cancel(self._after_id)
            self._after_id = None

    def _fire(self, *args: Any) -> None:
        self._after_id = None
        self._callback(*args)
