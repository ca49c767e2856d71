"""
===============================================================================
ContactStore – authoritative contact cache + network synchronisation
-------------------------------------------------------------------------------
Cache policy
    - The cache is replaced ONLY by replace() (or fetch_all(), which is
      load_all() + replace()), in a single reference swap after the whole
      response has been parsed. load_all() runs on a worker thread;
      replace() runs on the Tk thread. Readers see either the old or the
      new snapshot, never a mix.
    - create/update/delete never touch the cache; the caller re-fetches after
      a successful write (consistency over latency).

Failure policy
    - NetworkFailure is caught here, logged, and reported as False.
    - Operating on an id that is not cached is a precondition violation and
      raises ContactNotFoundError (never an empty diff).
===============================================================================
"""
from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Tuple, Union

from contacts.exceptions.errors import ContactNotFoundError, NetworkFailure
from contacts.models.contact import Contact
from contacts.repository.contact_api import ContactApi

logger = logging.getLogger(__name__)

ContactKey = Union[int, str]


class ContactStore:
    """In-memory contact cache bound to one ContactApi."""

    def __init__(self, *, api: ContactApi) -> None:
        self._api = api
        self._contacts: Tuple[Contact, ...] = ()

    # ------------------------------------------------------------------
    # Cache access
    # ------------------------------------------------------------------
    @property
    def contacts(self) -> Tuple[Contact, ...]:
        """Current snapshot."""
        return self._contacts

    def find_by_id(self, contact_id: ContactKey) -> Optional[Contact]:
        """Lookup by id; UI ids arrive as strings and are coerced to int."""
        try:
            key = int(contact_id)
        except (TypeError, ValueError):
            return None
        return next((c for c in self._contacts if c.id == key), None)

    def require(self, contact_id: ContactKey) -> Contact:
        contact = self.find_by_id(contact_id)
        if contact is None:
            raise ContactNotFoundError(contact_id)
        return contact

    def filter_by_prefix(self, query: str) -> Tuple[Contact, ...]:
        """Case-insensitive prefix match on full_name. Empty query -> everything."""
        if query == "":
            return self._contacts
        needle = query.lower()
        return tuple(c for c in self._contacts if c.full_name.lower().startswith(needle))

    def filter_by_tag(self, tag: str) -> Tuple[Contact, ...]:
        """Exact (case-sensitive) tag membership; untagged contacts never match."""
        return tuple(c for c in self._contacts if c.tags and c.has_tag(tag))

    # ------------------------------------------------------------------
    # Synchronisation
    # ------------------------------------------------------------------
    def load_all(self) -> Optional[Tuple[Contact, ...]]:
        """
        GET and parse the whole collection without touching the cache.

        Safe to run off the UI thread; hand the result to replace().

        Returns:
            The parsed snapshot, or None on network or payload failure.
        """
        try:
            raw = self._api.list_contacts()
            return tuple(Contact.from_api(item) for item in raw)
        except NetworkFailure as ex:
            logger.error(f"Contacts could not be retrieved: {ex}")
        except (KeyError, TypeError, ValueError) as ex:
            logger.error(f"Contacts payload could not be parsed: {ex}")
        return None

    def replace(self, snapshot: Tuple[Contact, ...]) -> None:
        """Swap the cache to a snapshot produced by load_all()."""
        self._contacts = tuple(snapshot)
        logger.info(f"Contact cache refreshed ({len(self._contacts)} contacts)")

    def fetch_all(self) -> bool:
        """Synchronous load_all() + replace(); False leaves the cache untouched."""
        fresh = self.load_all()
        if fresh is None:
            return False
        self.replace(fresh)
        return True

    def create(self, fields: Mapping[str, str], tags_string: str) -> bool:
        payload: Dict[str, str] = dict(fields)
        payload["tags"] = tags_string
        try:
            self._api.create_contact(payload)
        except NetworkFailure as ex:
            logger.error(f"Contact could not be added: {ex}")
            return False
        logger.info("Contact created")
        return True

    def compute_diff(
        self,
        contact_id: ContactKey,
        fields: Mapping[str, str],
        tags_string: str,
    ) -> Dict[str, str]:
        """
        Fields whose submitted value differs from the cached record, plus tags.

        Tags are always included; the whole tag string replaces the server's.
        """
        previous = self.require(contact_id)
        diff: Dict[str, str] = {
            key: value
            for key, value in fields.items()
            if key != "tags" and previous.field_value(key) != value
        }
        diff["tags"] = tags_string
        return diff

    def update(self, contact_id: ContactKey, fields: Mapping[str, str], tags_string: str) -> bool:
        payload = self.compute_diff(contact_id, fields, tags_string)
        try:
            self._api.update_contact(int(contact_id), payload)
        except NetworkFailure as ex:
            logger.error(f"Contact {contact_id} could not be saved: {ex}")
            return False
        logger.info(f"Contact {contact_id} updated ({', '.join(sorted(payload))})")
        return True

    def delete(self, contact_id: ContactKey) -> bool:
        try:
            self._api.delete_contact(int(contact_id))
        except NetworkFailure as ex:
            logger.error(f"Contact {contact_id} could not be deleted: {ex}")
            return False
        logger.info(f"Contact {contact_id} deleted")
        return True
