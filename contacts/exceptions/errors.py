"""Contacts feature exceptions."""
from __future__ import annotations


class ContactsError(Exception):
    """Base exception for contacts feature."""


class NetworkFailure(ContactsError):
    """Raised when the contact API is unreachable or answers with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ValidationFailure(ContactsError):
    """Raised when user input violates a client-side constraint."""


class DuplicateTagError(ValidationFailure):
    """Raised when a tag is added twice to the same pending edit."""

    def __init__(self, tag: str) -> None:
        super().__init__(f'"{tag}" already exists as a tag on this contact.')
        self.tag = tag


class ContactNotFoundError(ContactsError):
    """Raised when an operation addresses a contact id missing from the cache."""

    def __init__(self, contact_id: object) -> None:
        super().__init__(f"No cached contact with id {contact_id!r}")
        self.contact_id = contact_id
