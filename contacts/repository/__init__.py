"""Contact API access (HTTP collaborator)."""

from contacts.repository.contact_api import ContactApi, HttpContactApi

__all__ = ["ContactApi", "HttpContactApi"]
