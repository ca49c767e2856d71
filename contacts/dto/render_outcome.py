"""Three-way outcome of rendering a contact collection."""
from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence


NO_SEARCH_RESULTS_MESSAGE = "Search returned no contacts."
NO_CONTACTS_MESSAGE = "There are no contacts."


class RenderOutcome(str, Enum):
    LIST = "list"
    NO_SEARCH_RESULTS = "no_search_results"
    NO_CONTACTS = "no_contacts"

    @property
    def message(self) -> Optional[str]:
        if self is RenderOutcome.NO_SEARCH_RESULTS:
            return NO_SEARCH_RESULTS_MESSAGE
        if self is RenderOutcome.NO_CONTACTS:
            return NO_CONTACTS_MESSAGE
        return None


def resolve_render_outcome(contacts: Sequence[object], is_search_result: bool) -> RenderOutcome:
    """Empty search result and empty dataset must stay distinguishable."""
    if len(contacts) > 0:
        return RenderOutcome.LIST
    if is_search_result:
        return RenderOutcome.NO_SEARCH_RESULTS
    return RenderOutcome.NO_CONTACTS
