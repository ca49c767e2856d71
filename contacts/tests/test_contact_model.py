"""Unit tests for Contact parsing and tag splitting."""

from __future__ import annotations

import unittest

from contacts.models.contact import Contact, join_tags, split_tags


class TestTags(unittest.TestCase):
    def test_split_missing_or_empty(self) -> None:
        self.assertEqual(split_tags(None), ())
        self.assertEqual(split_tags(""), ())

    def test_split_drops_empty_items(self) -> None:
        self.assertEqual(split_tags("a,,b,"), ("a", "b"))

    def test_join(self) -> None:
        self.assertEqual(join_tags(["a", "b"]), "a,b")
        self.assertEqual(join_tags([]), "")


class TestContact(unittest.TestCase):
    def test_from_api(self) -> None:
        contact = Contact.from_api(
            {"id": "7", "full_name": "Ann Lee", "phone_number": "5550001111",
             "email": "ann@lee.io", "tags": "work,gym"}
        )
        self.assertEqual(contact.id, 7)
        self.assertEqual(contact.tags, ("work", "gym"))
        self.assertTrue(contact.has_tag("gym"))
        self.assertFalse(contact.has_tag("Gym"))

    def test_from_api_null_fields(self) -> None:
        contact = Contact.from_api({"id": 1, "full_name": "Ann", "email": None, "tags": None})
        self.assertEqual(contact.email, "")
        self.assertEqual(contact.tags, ())

    def test_field_value_and_form(self) -> None:
        contact = Contact(id=1, full_name="Ann", phone_number="1", email="e", tags=("x", "y"))
        self.assertEqual(contact.field_value("tags"), "x,y")
        self.assertEqual(contact.field_value("email"), "e")
        self.assertIsNone(contact.field_value("nickname"))
        self.assertEqual(
            contact.to_form(), {"full_name": "Ann", "phone_number": "1", "email": "e"}
        )


if __name__ == "__main__":
    unittest.main()
