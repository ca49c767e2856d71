"""ActionEvent DTO – a user action routed to the InteractionController."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from contacts.enum.contact_action import ContactAction
from contacts.enum.form_state import FormId


@dataclass(frozen=True)
class ActionEvent:
    """
    Tagged variant: 'kind' selects the handler, the other fields carry the
    payload the element declared when it was built.

    contact_id  EDIT / DELETE (string when it comes from a widget)
    form_id     CANCEL / ADD_TAG / REMOVE_TAG
    text        tag text for ADD_TAG / REMOVE_TAG / FILTER_TAG
    """

    kind: ContactAction
    contact_id: Optional[Union[int, str]] = None
    form_id: Optional[FormId] = None
    text: str = ""
