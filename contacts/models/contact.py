"""
===============================================================================
Contact – cached contact record as delivered by the contact API
-------------------------------------------------------------------------------
Wire format
    {"id": 4, "full_name": "...", "phone_number": "...", "email": "...",
     "tags": "work,friends"}

    'tags' travels as ONE comma-joined string and may be missing, null or "".
    In memory the tags are an ordered tuple.

Immutability
    Instances are frozen. The cache never patches a record; a changed contact
    is only observed through the next full fetch.
===============================================================================
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

TAG_DELIMITER = ","

# form fields sent to the API besides 'tags'
FORM_FIELDS: Tuple[str, ...] = ("full_name", "phone_number", "email")


def split_tags(raw: Optional[str]) -> Tuple[str, ...]:
    """Split the wire representation into an ordered tuple, dropping empty items."""
    if not raw:
        return ()
    return tuple(part for part in str(raw).split(TAG_DELIMITER) if part)


def join_tags(tags: Iterable[str]) -> str:
    return TAG_DELIMITER.join(tags)


@dataclass(frozen=True, slots=True)
class Contact:
    id: int
    full_name: str
    phone_number: str = ""
    email: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)

    # -------------------- Factory ------------------------------------ #
    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "Contact":
        """Build a Contact from one JSON object of the collection endpoint."""
        return cls(
            id=int(data["id"]),
            full_name=str(data.get("full_name") or ""),
            phone_number=str(data.get("phone_number") or ""),
            email=str(data.get("email") or ""),
            tags=split_tags(data.get("tags")),
        )

    # -------------------- Views -------------------------------------- #
    def field_value(self, name: str) -> Any:
        """Value of a form field as the server last reported it."""
        if name == "tags":
            return join_tags(self.tags)
        return getattr(self, name, None)

    def to_form(self) -> Dict[str, str]:
        """Non-tag form fields, used to populate the edit form."""
        return {name: getattr(self, name) for name in FORM_FIELDS}

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags
