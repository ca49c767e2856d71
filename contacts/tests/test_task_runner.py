"""Unit tests for the inline and threaded task runners."""

from __future__ import annotations

import threading
import time
import unittest

from contacts.controllers.task_runner import InlineTaskRunner, ThreadedTaskRunner
from contacts.tests.fakes import FakeScheduler


class TestInlineTaskRunner(unittest.TestCase):
    def test_runs_immediately(self) -> None:
        results: list[int] = []
        InlineTaskRunner().submit(lambda: 41 + 1, results.append)
        self.assertEqual(results, [42])


class TestThreadedTaskRunner(unittest.TestCase):
    def setUp(self) -> None:
        self.scheduler = FakeScheduler()
        self.runner = ThreadedTaskRunner(self.scheduler, poll_ms=50)

    def _pump(self, until, timeout: float = 2.0) -> None:
        deadline = time.monotonic() + timeout
        while not until():
            if time.monotonic() > deadline:
                self.fail("task did not complete")
            time.sleep(0.01)
            self.scheduler.advance(50)

    def test_callback_runs_on_polling_thread(self) -> None:
        results: list[tuple[int, threading.Thread]] = []
        worker_threads: list[threading.Thread] = []

        def task() -> int:
            worker_threads.append(threading.current_thread())
            return 7

        self.runner.submit(task, lambda r: results.append((r, threading.current_thread())))
        self.assertEqual(results, [])
        self._pump(lambda: bool(results))

        value, callback_thread = results[0]
        self.assertEqual(value, 7)
        self.assertIs(callback_thread, threading.current_thread())
        self.assertIsNot(worker_threads[0], threading.current_thread())
        self.assertEqual(self.scheduler.pending, 0)

    def test_task_error_is_raised_on_drain(self) -> None:
        def task() -> int:
            raise RuntimeError("boom")

        self.runner.submit(task, lambda _r: None)
        with self.assertLogs("contacts.controllers.task_runner", level="ERROR"):
            with self.assertRaises(RuntimeError):
                self._pump(lambda: False)

    def test_callback_that_submits_keeps_a_single_polling_chain(self) -> None:
        gate = threading.Event()
        first_done: list[int] = []

        def on_first(result: int) -> None:
            first_done.append(result)
            self.runner.submit(gate.wait, lambda _r: None)

        self.runner.submit(lambda: 1, on_first)
        self._pump(lambda: bool(first_done))

        self.assertEqual(self.scheduler.pending, 1)
        self.runner.cancel_polling()
        self.assertEqual(self.scheduler.pending, 0)
        gate.set()

    def test_failing_callback_does_not_strand_other_completions(self) -> None:
        delivered: list[str] = []

        def broken(_result: str) -> None:
            raise RuntimeError("callback boom")

        self.runner.submit(lambda: "a", broken)
        self.runner.submit(lambda: "b", delivered.append)
        deadline = time.monotonic() + 2.0
        while self.runner._done.qsize() < 2:
            if time.monotonic() > deadline:
                self.fail("tasks did not complete")
            time.sleep(0.01)

        with self.assertLogs("contacts.controllers.task_runner", level="ERROR"):
            with self.assertRaises(RuntimeError):
                self.scheduler.advance(50)
        self.assertEqual(delivered, ["b"])
        self.assertEqual(self.scheduler.pending, 0)

    def test_cancel_polling(self) -> None:
        gate = threading.Event()
        self.runner.submit(gate.wait, lambda _r: None)
        self.assertEqual(self.scheduler.pending, 1)
        self.runner.cancel_polling()
        self.assertEqual(self.scheduler.pending, 0)
        gate.set()


if __name__ == "__main__":
    unittest.main()
