"""
===============================================================================
Task runners – run blocking API calls without freezing the Tk mainloop
-------------------------------------------------------------------------------
ThreadedTaskRunner
    The blocking call runs on a daemon worker thread. Its result is put on a
    queue which is drained on the Tk thread via 'after' polling, so every
    completion callback (and therefore every state change) happens on the
    UI thread.

InlineTaskRunner
    Runs the call and the callback immediately; used by tests and headless
    callers.

No ordering guarantee exists between independent submissions, and in-flight
tasks cannot be cancelled.
===============================================================================
"""
from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Callable, Optional, Protocol, Tuple, TypeVar

from contacts.controllers.debouncer import Scheduler

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskRunner(Protocol):
    def submit(self, task: Callable[[], T], on_done: Callable[[T], None]) -> None: ...


class InlineTaskRunner:
    def submit(self, task: Callable[[], T], on_done: Callable[[T], None]) -> None:
        on_done(task())


_Completion = Tuple[Callable[[Any], None], Any, Optional[BaseException]]


class ThreadedTaskRunner:
    def __init__(self, scheduler: Scheduler, *, poll_ms: int = 50) -> None:
        self._scheduler = scheduler
        self._poll_ms = poll_ms
        self._done: "queue.Queue[_Completion]" = queue.Queue()
        self._in_flight = 0
        self._after_id: Optional[str] = None

    def submit(self, task: Callable[[], T], on_done: Callable[[T], None]) -> None:
        def worker() -> None:
            try:
                self._done.put((on_done, task(), None))
            except BaseException as ex:  # handed to the UI thread below
                self._done.put((on_done, None, ex))

        self._in_flight += 1
        threading.Thread(target=worker, daemon=True).start()
        if self._after_id is None:
            self._after_id = self._scheduler.after(self._poll_ms, self._drain)

    def cancel_polling(self) -> None:
        if self._after_id is not None:
            self._scheduler.after_cancel(self._after_id)
            self._after_id = None

    def _drain(self) -> None:
        self._after_id = None
        failures: list[BaseException] = []
        try:
            while True:
                try:
                    on_done, result, error = self._done.get_nowait()
                except queue.Empty:
                    break
                self._in_flight -= 1
                if error is not None:
                    logger.error(f"Background task failed: {error!r}")
                    failures.append(error)
                    continue
                try:
                    on_done(result)
                except Exception as ex:
                    logger.error(f"Completion callback failed: {ex!r}")
                    failures.append(ex)
        finally:
            # a callback may already have restarted polling through submit()
            if self._in_flight > 0 and self._after_id is None:
                self._after_id = self._scheduler.after(self._poll_ms, self._drain)
        if failures:
            # surfaces through Tk's report_callback_exception
            raise failures[0]
