"""Unit tests for PendingEdit tag handling."""

from __future__ import annotations

import unittest

from contacts.dto.pending_edit import PendingEdit
from contacts.exceptions.errors import DuplicateTagError


class TestPendingEdit(unittest.TestCase):
    def test_for_contact_copies_tags(self) -> None:
        source = ["work", "friends"]
        pending = PendingEdit.for_contact(4, source)
        source.append("family")
        self.assertEqual(pending.contact_id, 4)
        self.assertEqual(pending.tags, ("work", "friends"))

    def test_add_keeps_order(self) -> None:
        pending = PendingEdit()
        self.assertTrue(pending.add_tag("work"))
        self.assertTrue(pending.add_tag("gym"))
        self.assertEqual(pending.tags_string, "work,gym")

    def test_add_empty_is_noop(self) -> None:
        pending = PendingEdit()
        self.assertFalse(pending.add_tag(""))
        self.assertEqual(pending.tags, ())

    def test_duplicate_raises_with_message(self) -> None:
        pending = PendingEdit.for_contact(1, ["work"])
        with self.assertRaises(DuplicateTagError) as ctx:
            pending.add_tag("work")
        self.assertEqual(str(ctx.exception), '"work" already exists as a tag on this contact.')
        self.assertEqual(pending.tags, ("work",))

    def test_duplicate_check_is_case_sensitive(self) -> None:
        pending = PendingEdit.for_contact(1, ["work"])
        self.assertTrue(pending.add_tag("Work"))
        self.assertEqual(pending.tags, ("work", "Work"))

    def test_remove_trims_and_keeps_order(self) -> None:
        pending = PendingEdit.for_contact(1, ["a", "b", "c"])
        self.assertTrue(pending.remove_tag("  b "))
        self.assertEqual(pending.tags_string, "a,c")

    def test_remove_missing_tag_changes_nothing(self) -> None:
        pending = PendingEdit.for_contact(1, ["a", "b"])
        self.assertFalse(pending.remove_tag("zzz"))
        self.assertEqual(pending.tags, ("a", "b"))

    def test_empty_tags_string(self) -> None:
        self.assertEqual(PendingEdit().tags_string, "")

    def test_tag_list_is_not_a_constructor_argument(self) -> None:
        with self.assertRaises(TypeError):
            PendingEdit(contact_id=1, _tags=["work"])  # type: ignore[call-arg]

    def test_instances_do_not_share_tag_lists(self) -> None:
        first, second = PendingEdit(), PendingEdit()
        first.add_tag("work")
        self.assertEqual(second.tags, ())


if __name__ == "__main__":
    unittest.main()
