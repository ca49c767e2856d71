"""
===============================================================================
ContactsView – main contacts screen (SearchBar | ContactListPanel | forms)
-------------------------------------------------------------------------------
- SearchBar (top): add button, see-all affordance, search field
- ContactListPanel (center): contact cards or an empty-state message
- ContactForm x2 (toplevels): 'add_form' and 'edit_form'

Composition
  HttpContactApi -> ContactStore -> InteractionController(presenter=self)

This class is the Tk implementation of IContactsPresenter; it never calls
the API and keeps no contact data of its own.
===============================================================================
"""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk, messagebox
from typing import Any, Dict, Optional, Sequence

from core.config.config_service import ConfigService, get_config_service
from core.contracts.ui import IModuleView

from contacts.controllers.interaction_controller import InteractionController
from contacts.controllers.presenter_contract import IContactsPresenter
from contacts.controllers.task_runner import ThreadedTaskRunner
from contacts.dto.field_validation import FieldValidation
from contacts.dto.pending_edit import PendingEdit
from contacts.dto.render_outcome import RenderOutcome, resolve_render_outcome
from contacts.enum.form_state import FormId, FormState
from contacts.gui.contact_form import ContactForm
from contacts.gui.contact_list_panel import ContactListPanel
from contacts.gui.search_bar import SearchBar
from contacts.models.contact import Contact
from contacts.repository.contact_api import HttpContactApi
from contacts.services.contact_store import ContactStore

logger = logging.getLogger(__name__)


class ContactsView(ttk.Frame, IContactsPresenter, IModuleView):
    def __init__(self, parent: tk.Misc, *, config: Optional[ConfigService] = None, **_ignore: Any) -> None:
        super().__init__(parent)
        cfg = config or get_config_service()

        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        # TOP
        self.search_bar = SearchBar(self)
        self.search_bar.grid(row=0, column=0, sticky="ew", padx=12, pady=(10, 8))

        # MIDDLE
        self.list_panel = ContactListPanel(self)
        self.list_panel.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 10))

        # FORMS
        self.forms: Dict[FormId, ContactForm] = {
            FormId.ADD: ContactForm(self, form_id=FormId.ADD, title_text="Create Contact"),
            FormId.EDIT: ContactForm(self, form_id=FormId.EDIT, title_text="Edit Contact"),
        }

        # ------------------------------------------------------------------
        # Compose api + store + controller
        # ------------------------------------------------------------------
        self._api = HttpContactApi(
            base_url=cfg.api.base_url,
            contacts_path=cfg.api.contacts_path,
            timeout=cfg.api.timeout_seconds,
        )
        self._runner = ThreadedTaskRunner(self, poll_ms=cfg.ui.tasks_poll_ms)
        self.store = ContactStore(api=self._api)
        self.controller = InteractionController(
            store=self.store,
            presenter=self,
            scheduler=self,
            runner=self._runner,
            search_delay_ms=cfg.ui.search_debounce_ms,
        )
        self._disposed = False

    # ------------------------------------------------------------------
    # IModuleView
    # ------------------------------------------------------------------
    def on_show(self) -> None:
        self.controller.start()

    def on_hide(self) -> None:
        for form_id in self.forms:
            if self.controller.form_state(form_id) is not FormState.IDLE:
                self.controller.close_form(form_id)

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self.controller.shutdown()
        self._runner.cancel_polling()
        self._api.close()

    # ------------------------------------------------------------------
    # IContactsPresenter: wiring
    # ------------------------------------------------------------------
    def bind_handlers(self, controller: Any) -> None:
        self.search_bar.set_controller(controller)
        self.list_panel.set_dispatch(controller.handle_action)
        for form in self.forms.values():
            form.set_controller(controller)

    def unbind_handlers(self) -> None:
        self.search_bar.clear_controller()
        self.list_panel.set_dispatch(None)
        for form in self.forms.values():
            form.clear_controller()

    # ------------------------------------------------------------------
    # IContactsPresenter: collection
    # ------------------------------------------------------------------
    def render_contacts(self, contacts: Sequence[Contact], is_search_result: bool) -> RenderOutcome:
        outcome = resolve_render_outcome(contacts, is_search_result)
        if outcome is RenderOutcome.LIST:
            self.list_panel.render_contacts(contacts)
        else:
            self.list_panel.render_message(outcome.message or "")
        return outcome

    def show_see_all(self) -> None:
        self.search_bar.show_see_all()

    def hide_see_all(self) -> None:
        self.search_bar.hide_see_all()

    # ------------------------------------------------------------------
    # IContactsPresenter: forms
    # ------------------------------------------------------------------
    def show_add_form(self, pending: PendingEdit) -> None:
        form = self.forms[FormId.ADD]
        form.set_tags(pending.tags)
        form.show()

    def render_edit_form(self, contact: Contact, pending: PendingEdit) -> None:
        form = self.forms[FormId.EDIT]
        form.clear_errors()
        form.set_values(contact.to_form())
        form.set_tags(pending.tags)
        form.set_target(contact.id)
        form.show()

    def hide_form(self, form_id: FormId) -> None:
        self.forms[form_id].hide()

    def append_tag(self, form_id: FormId, tag: str) -> None:
        self.forms[form_id].append_tag(tag)

    def remove_tag(self, form_id: FormId, tag: str) -> None:
        self.forms[form_id].remove_tag(tag)

    def clear_tag_input(self, form_id: FormId) -> None:
        self.forms[form_id].clear_tag_input()

    # ------------------------------------------------------------------
    # IContactsPresenter: validation display
    # ------------------------------------------------------------------
    def show_field_validation(self, form_id: FormId, validation: FieldValidation) -> None:
        self.forms[form_id].show_validation(validation)

    def clear_field_message(self, form_id: FormId, field_name: str) -> None:
        self.forms[form_id].clear_message(field_name)

    def has_form_error(self, form_id: FormId) -> bool:
        return self.forms[form_id].has_banner

    def show_form_error(self, form_id: FormId) -> None:
        self.forms[form_id].show_banner()

    # ------------------------------------------------------------------
    # IContactsPresenter: notifications
    # ------------------------------------------------------------------
    def alert(self, message: str) -> None:
        messagebox.showinfo(title="Contacts", message=message, parent=self.winfo_toplevel())

    def warn(self, message: str) -> None:
        messagebox.showwarning(title="Contacts", message=message, parent=self.winfo_toplevel())

    def confirm(self, message: str) -> bool:
        return bool(messagebox.askyesno(title="Contacts", message=message, parent=self.winfo_toplevel()))
