"""Contact API protocol and its HTTP implementation.

The API speaks JSON on reads and form-encoded bodies on writes. Any transport
error, timeout or non-2xx status is reported as NetworkFailure; callers do not
see finer-grained codes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Protocol

import requests

from contacts.exceptions.errors import NetworkFailure

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class ContactApi(Protocol):
    """Protocol for the remote contact collection."""

    def list_contacts(self) -> List[Dict[str, Any]]:
        """
        Fetch the whole collection.

        Returns:
            Raw JSON objects, 'tags' still comma-joined

        Raises:
            NetworkFailure
        """
        ...

    def create_contact(self, payload: Mapping[str, str]) -> None:
        """POST a new contact. Raises NetworkFailure."""
        ...

    def update_contact(self, contact_id: int, payload: Mapping[str, str]) -> None:
        """PUT a (partial) contact. Raises NetworkFailure."""
        ...

    def delete_contact(self, contact_id: int) -> None:
        """DELETE a contact. Raises NetworkFailure."""
        ...


class HttpContactApi:
    """requests-based ContactApi."""

    def __init__(
        self,
        *,
        base_url: str,
        contacts_path: str = "/api/contacts/",
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._collection_url = base_url.rstrip("/") + "/" + contacts_path.strip("/") + "/"
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def collection_url(self) -> str:
        return self._collection_url

    def member_url(self, contact_id: int) -> str:
        return f"{self._collection_url}{int(contact_id)}"

    # ------------------------------------------------------------------
    # ContactApi
    # ------------------------------------------------------------------
    def list_contacts(self) -> List[Dict[str, Any]]:
        response = self._send("GET", self._collection_url)
        try:
            data = response.json()
        except ValueError as ex:
            raise NetworkFailure(f"Invalid JSON from {self._collection_url}: {ex}") from ex
        if not isinstance(data, list):
            raise NetworkFailure(f"Expected a JSON array from {self._collection_url}")
        return data

    def create_contact(self, payload: Mapping[str, str]) -> None:
        self._send("POST", self._collection_url, data=dict(payload))

    def update_contact(self, contact_id: int, payload: Mapping[str, str]) -> None:
        self._send("PUT", self.member_url(contact_id), data=dict(payload))

    def delete_contact(self, contact_id: int) -> None:
        self._send("DELETE", self.member_url(contact_id))

    def close(self) -> None:
        self._session.close()

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def _send(self, method: str, url: str, *, data: Optional[Dict[str, str]] = None) -> requests.Response:
        headers = {"Content-Type": FORM_CONTENT_TYPE} if data is not None else None
        try:
            response = self._session.request(
                method, url, data=data, headers=headers, timeout=self._timeout
            )
        except requests.RequestException as ex:
            raise NetworkFailure(f"{method} {url} failed: {ex}") from ex

        logger.debug("%s %s -> %s", method, url, response.status_code)
        if not 200 <= response.status_code < 300:
            raise NetworkFailure(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code,
            )
        return response
