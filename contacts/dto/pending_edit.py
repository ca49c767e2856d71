"""
===============================================================================
PendingEdit – in-progress tag state of ONE open contact form
-------------------------------------------------------------------------------
Lifetime
    Created when the add/edit form opens, owned by the controller's form
    context, dropped when the form is hidden or submitted successfully.

Source of truth
    The ordered tag list held here is what gets transmitted on submit
    (as 'tags_string'). The tag widgets only mirror it.
===============================================================================
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from contacts.exceptions.errors import DuplicateTagError
from contacts.models.contact import join_tags


@dataclass
class PendingEdit:
    contact_id: Optional[int] = None
    _tags: List[str] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def for_contact(cls, contact_id: Optional[int], tags: Iterable[str] = ()) -> "PendingEdit":
        pending = cls(contact_id=contact_id)
        pending._tags.extend(tags)
        return pending

    @property
    def tags(self) -> Tuple[str, ...]:
        return tuple(self._tags)

    @property
    def tags_string(self) -> str:
        """Comma-joined tags as sent to the API."""
        return join_tags(self._tags)

    def add_tag(self, value: str) -> bool:
        """
        Append a tag.

        Returns False for empty input (nothing happens). Duplicates are
        compared case-sensitively and raise DuplicateTagError.
        """
        if value == "":
            return False
        if value in self._tags:
            raise DuplicateTagError(value)
        self._tags.append(value)
        return True

    def remove_tag(self, text: str) -> bool:
        """Remove the tag matching the trimmed text; order of the rest is kept."""
        tag = text.strip()
        try:
            self._tags.remove(tag)
        except ValueError:
            return False
        return True
