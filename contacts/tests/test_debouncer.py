"""Unit tests for the single-timer Debouncer."""

from __future__ import annotations

import unittest

from contacts.controllers.debouncer import Debouncer
from contacts.tests.fakes import FakeScheduler


class TestDebouncer(unittest.TestCase):
    def setUp(self) -> None:
        self.scheduler = FakeScheduler()
        self.calls: list[str] = []
        self.debouncer = Debouncer(self.scheduler, 300, self.calls.append)

    def test_burst_fires_once_with_last_value(self) -> None:
        for value in ("a", "ab", "abc"):
            self.debouncer.trigger(value)
            self.scheduler.advance(50)
        self.assertEqual(self.calls, [])
        self.assertEqual(self.scheduler.pending, 1)

        self.scheduler.advance(300)
        self.assertEqual(self.calls, ["abc"])
        self.assertFalse(self.debouncer.pending)

    def test_fires_after_delay(self) -> None:
        self.debouncer.trigger("x")
        self.scheduler.advance(299)
        self.assertEqual(self.calls, [])
        self.scheduler.advance(1)
        self.assertEqual(self.calls, ["x"])

    def test_separate_bursts_fire_separately(self) -> None:
        self.debouncer.trigger("a")
        self.scheduler.advance(400)
        self.debouncer.trigger("b")
        self.scheduler.advance(400)
        self.assertEqual(self.calls, ["a", "b"])

    def test_cancel_drops_pending_call(self) -> None:
        self.debouncer.trigger("a")
        self.debouncer.cancel()
        self.scheduler.advance(1000)
        self.assertEqual(self.calls, [])
        self.assertEqual(self.scheduler.pending, 0)


if __name__ == "__main__":
    unittest.main()
