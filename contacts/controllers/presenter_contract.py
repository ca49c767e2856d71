"""contacts/controllers/presenter_contract.py
==========================================

Contract between InteractionController and the view that renders contacts.

The presenter never talks to the network and holds no copy of the contact
cache; everything it shows is handed over by the controller. Implementations
must be idempotent where noted so that repeated calls never stack widgets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from contacts.dto.field_validation import FieldValidation
from contacts.dto.pending_edit import PendingEdit
from contacts.dto.render_outcome import RenderOutcome
from contacts.enum.form_state import FormId
from contacts.models.contact import Contact


class IContactsPresenter(ABC):
    # ------------------------------------------------------------------
    # event wiring
    # ------------------------------------------------------------------
    @abstractmethod
    def bind_handlers(self, controller: Any) -> None:
        """Register the controller's handlers on the widgets (called once)."""

    @abstractmethod
    def unbind_handlers(self) -> None:
        """Remove everything bind_handlers registered."""

    # ------------------------------------------------------------------
    # collection
    # ------------------------------------------------------------------
    @abstractmethod
    def render_contacts(self, contacts: Sequence[Contact], is_search_result: bool) -> RenderOutcome:
        """Render the list, the 'no results' or the 'no contacts' message."""

    @abstractmethod
    def show_see_all(self) -> None:
        """Show the 'See All Contacts' affordance. Idempotent."""

    @abstractmethod
    def hide_see_all(self) -> None:
        """Remove the affordance if present."""

    # ------------------------------------------------------------------
    # forms
    # ------------------------------------------------------------------
    @abstractmethod
    def show_add_form(self, pending: PendingEdit) -> None:
        """Open the empty add form."""

    @abstractmethod
    def render_edit_form(self, contact: Contact, pending: PendingEdit) -> None:
        """Populate and open the edit form addressed to contact.id."""

    @abstractmethod
    def hide_form(self, form_id: FormId) -> None:
        """Close the form, reset inputs, messages, banner and tag list."""

    @abstractmethod
    def append_tag(self, form_id: FormId, tag: str) -> None:
        """Add one tag entry to the form's visible tag list."""

    @abstractmethod
    def remove_tag(self, form_id: FormId, tag: str) -> None:
        """Remove the visible tag entry with this text."""

    @abstractmethod
    def clear_tag_input(self, form_id: FormId) -> None:
        """Empty the tag input field."""

    # ------------------------------------------------------------------
    # validation display
    # ------------------------------------------------------------------
    @abstractmethod
    def show_field_validation(self, form_id: FormId, validation: FieldValidation) -> None:
        """Mark/unmark the field and show/remove its message."""

    @abstractmethod
    def clear_field_message(self, form_id: FormId, field_name: str) -> None:
        """Remove the message next to the field (invalid mark stays)."""

    @abstractmethod
    def has_form_error(self, form_id: FormId) -> bool:
        """True if the form-level banner is currently shown."""

    @abstractmethod
    def show_form_error(self, form_id: FormId) -> None:
        """Insert the form-level banner. Idempotent."""

    # ------------------------------------------------------------------
    # notifications
    # ------------------------------------------------------------------
    @abstractmethod
    def alert(self, message: str) -> None: ...

    @abstractmethod
    def warn(self, message: str) -> None: ...

    @abstractmethod
    def confirm(self, message: str) -> bool: ...
