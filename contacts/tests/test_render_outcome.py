"""Unit tests for the list/empty-search/empty-dataset distinction."""

from __future__ import annotations

import unittest

from contacts.dto.render_outcome import RenderOutcome, resolve_render_outcome
from contacts.models.contact import Contact


class TestRenderOutcome(unittest.TestCase):
    def test_non_empty_is_list(self) -> None:
        contacts = [Contact(id=1, full_name="Ann")]
        self.assertIs(resolve_render_outcome(contacts, True), RenderOutcome.LIST)
        self.assertIs(resolve_render_outcome(contacts, False), RenderOutcome.LIST)
        self.assertIsNone(RenderOutcome.LIST.message)

    def test_empty_search(self) -> None:
        outcome = resolve_render_outcome([], True)
        self.assertIs(outcome, RenderOutcome.NO_SEARCH_RESULTS)
        self.assertEqual(outcome.message, "Search returned no contacts.")

    def test_empty_dataset(self) -> None:
        outcome = resolve_render_outcome((), False)
        self.assertIs(outcome, RenderOutcome.NO_CONTACTS)
        self.assertEqual(outcome.message, "There are no contacts.")


if __name__ == "__main__":
    unittest.main()
