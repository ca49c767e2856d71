"""contacts/controllers/interaction_controller.py

===============================================================================
InteractionController – single dispatch point for every user event
-------------------------------------------------------------------------------
Owns
    - action dispatch (table keyed by ContactAction)
    - per-form context: FormState + PendingEdit, keyed by the form's FormId
    - submit gating (client-side validation before any network call)
    - debounced search (one timer per controller)
    - keystroke admission and blur/focus validation triggering

Form lifecycle
    IDLE -> EDITING (form opened) -> VALIDATING (submit) -> SUBMITTING
         -> IDLE     on success (alert, close, refresh)
         -> EDITING  on validation failure or network failure

Does NOT
    - render anything itself (IContactsPresenter does)
    - fetch over the network itself (ContactStore does; the snapshot is
      swapped in on the UI thread)
===============================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Mapping, Optional, Tuple

from contacts.controllers.debouncer import Debouncer, Scheduler
from contacts.controllers.presenter_contract import IContactsPresenter
from contacts.controllers.task_runner import InlineTaskRunner, TaskRunner
from contacts.dto.action_event import ActionEvent
from contacts.dto.pending_edit import PendingEdit
from contacts.enum.contact_action import ContactAction
from contacts.enum.form_state import FormId, FormState
from contacts.exceptions.errors import ContactNotFoundError, DuplicateTagError
from contacts.models.contact import FORM_FIELDS, Contact
from contacts.services import field_rules
from contacts.services.contact_store import ContactStore

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_DELAY_MS = 300
DELETE_CONFIRMATION = "Are you sure you want to delete contact?"


@dataclass
class FormContext:
    form_id: FormId
    pending: PendingEdit
    state: FormState = FormState.EDITING


class InteractionController:
    """Mediator between widgets, ContactStore and the presenter."""

    def __init__(
        self,
        *,
        store: ContactStore,
        presenter: IContactsPresenter,
        scheduler: Scheduler,
        runner: Optional[TaskRunner] = None,
        search_delay_ms: int = DEFAULT_SEARCH_DELAY_MS,
    ) -> None:
        self._store = store
        self._view = presenter
        self._runner: TaskRunner = runner or InlineTaskRunner()
        self._search = Debouncer(scheduler, search_delay_ms, self.run_search)
        self._forms: Dict[FormId, FormContext] = {}
        self._started = False

        self._dispatch: Dict[ContactAction, Callable[[ActionEvent], None]] = {
            ContactAction.ADD: self._on_add,
            ContactAction.EDIT: self._on_edit,
            ContactAction.DELETE: self._on_delete,
            ContactAction.CANCEL: self._on_cancel,
            ContactAction.ADD_TAG: self._on_add_tag,
            ContactAction.REMOVE_TAG: self._on_remove_tag,
            ContactAction.FILTER_TAG: self._on_filter_tag,
            ContactAction.SEE_ALL: self._on_see_all,
        }

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Register handlers once and load the initial list."""
        if self._started:
            return
        self._view.bind_handlers(self)
        self._started = True
        self.refresh()

    def shutdown(self) -> None:
        """Explicit teardown: cancel the search timer, drop forms, unbind."""
        self._search.cancel()
        self._forms.clear()
        if self._started:
            self._view.unbind_handlers()
            self._started = False

    @property
    def started(self) -> bool:
        return self._started

    # ------------------------------------------------------------------
    # Introspection (used by the view and tests)
    # ------------------------------------------------------------------
    def form_state(self, form_id: FormId) -> FormState:
        ctx = self._forms.get(form_id)
        return ctx.state if ctx else FormState.IDLE

    def pending_edit(self, form_id: FormId) -> Optional[PendingEdit]:
        ctx = self._forms.get(form_id)
        return ctx.pending if ctx else None

    # ------------------------------------------------------------------
    # Clicks
    # ------------------------------------------------------------------
    def handle_action(self, event: ActionEvent) -> None:
        handler = self._dispatch.get(event.kind)
        if handler is None:
            logger.warning(f"No handler for action {event.kind!r}")
            return
        handler(event)

    def _on_add(self, _event: ActionEvent) -> None:
        ctx = self._open_form(FormId.ADD, PendingEdit.for_contact(None))
        self._view.show_add_form(ctx.pending)

    def _on_edit(self, event: ActionEvent) -> None:
        contact = self._store.require(event.contact_id)
        ctx = self._open_form(FormId.EDIT, PendingEdit.for_contact(contact.id, contact.tags))
        self._view.render_edit_form(contact, ctx.pending)

    def _on_delete(self, event: ActionEvent) -> None:
        if not self._view.confirm(DELETE_CONFIRMATION):
            return
        contact_id = event.contact_id
        self._runner.submit(
            lambda: self._store.delete(contact_id),
            partial(self._after_delete, contact_id),
        )

    def _after_delete(self, contact_id: object, ok: bool) -> None:
        if not ok:
            logger.error(f"Contact {contact_id} could not be deleted.")
            self._view.alert("Contact could not be deleted.")
            return
        self.refresh()

    def _on_cancel(self, event: ActionEvent) -> None:
        if event.form_id is not None:
            self.close_form(event.form_id)

    def _on_add_tag(self, event: ActionEvent) -> None:
        ctx = self._context_for(event)
        if ctx is None:
            return
        try:
            added = ctx.pending.add_tag(event.text)
        except DuplicateTagError as ex:
            self._view.warn(str(ex))
            return
        if added:
            self._view.append_tag(ctx.form_id, event.text)
            self._view.clear_tag_input(ctx.form_id)

    def _on_remove_tag(self, event: ActionEvent) -> None:
        ctx = self._context_for(event)
        if ctx is None:
            return
        tag = event.text.strip()
        if ctx.pending.remove_tag(tag):
            self._view.remove_tag(ctx.form_id, tag)
        else:
            logger.warning(f"Tag {tag!r} not present on {ctx.form_id.value}")

    def _on_filter_tag(self, event: ActionEvent) -> None:
        contacts = self._store.filter_by_tag(event.text)
        self._view.show_see_all()
        self._view.render_contacts(contacts, False)

    def _on_see_all(self, _event: ActionEvent) -> None:
        self._view.hide_see_all()
        self._view.render_contacts(self._store.contacts, False)

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------
    def _open_form(self, form_id: FormId, pending: PendingEdit) -> FormContext:
        ctx = FormContext(form_id=form_id, pending=pending)
        self._forms[form_id] = ctx
        return ctx

    def _context_for(self, event: ActionEvent) -> Optional[FormContext]:
        ctx = self._forms.get(event.form_id) if event.form_id is not None else None
        if ctx is None:
            logger.warning(f"{event.kind.value} ignored: form {event.form_id!r} is not open")
        return ctx

    def close_form(self, form_id: FormId) -> None:
        self._forms.pop(form_id, None)
        self._view.hide_form(form_id)

    def submit_form(self, form_id: FormId, fields: Mapping[str, str]) -> bool:
        """
        Validate and, if valid, send the form.

        Returns:
            True if a network request was issued, False if rejected locally.
        """
        ctx = self._forms.get(form_id)
        if ctx is None:
            logger.warning(f"Submit ignored: form {form_id.value} is not open")
            return False
        if ctx.state is FormState.SUBMITTING:
            logger.info(f"Submit ignored: {form_id.value} is already submitting")
            return False

        ctx.state = FormState.VALIDATING
        values = {name: fields.get(name, "") for name in FORM_FIELDS}
        results = field_rules.validate_form(values)
        for validation in results.values():
            self._view.show_field_validation(form_id, validation)

        if not field_rules.form_is_valid(results):
            if not self._view.has_form_error(form_id):
                self._view.show_form_error(form_id)
            ctx.state = FormState.EDITING
            return False

        tags_string = ctx.pending.tags_string
        if form_id is FormId.EDIT:
            contact_id = ctx.pending.contact_id
            try:
                self._store.require(contact_id)
            except ContactNotFoundError:
                ctx.state = FormState.EDITING
                logger.error(f"Submit rejected: contact {contact_id} is no longer cached")
                raise
            task = partial(self._store.update, contact_id, values, tags_string)
        else:
            task = partial(self._store.create, values, tags_string)

        ctx.state = FormState.SUBMITTING
        self._runner.submit(task, partial(self._after_submit, ctx))
        return True

    def _after_submit(self, ctx: FormContext, ok: bool) -> None:
        verb = "added" if ctx.form_id is FormId.ADD else "saved"
        if not ok:
            ctx.state = FormState.EDITING
            logger.error(f"Error: Form could not be submitted ({ctx.form_id.value}).")
            self._view.alert(f"Contact could not be {verb}.")
            return

        ctx.state = FormState.IDLE
        self._view.alert(f"Contact was successfully {verb}.")
        if self._forms.get(ctx.form_id) is ctx:
            self.close_form(ctx.form_id)
        self.refresh()

    # ------------------------------------------------------------------
    # Field events
    # ------------------------------------------------------------------
    def on_field_blur(self, form_id: FormId, field_name: str, value: str) -> None:
        if field_name not in field_rules.FIELD_RULES:
            return
        self._view.show_field_validation(form_id, field_rules.validate_field(field_name, value))

    def on_field_focus(self, form_id: FormId, field_name: str) -> None:
        self._view.clear_field_message(form_id, field_name)

    def admit_keystroke(self, field_name: str, char: str, keysym: str = "") -> bool:
        return field_rules.admit_keystroke(field_name, char, keysym)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def on_search_input(self, value: str) -> None:
        self._search.trigger(value)

    def run_search(self, value: str) -> None:
        if value == "":
            self._view.render_contacts(self._store.contacts, False)
            return
        self._view.render_contacts(self._store.filter_by_prefix(value), True)

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        self._runner.submit(self._store.load_all, self._after_fetch)

    def _after_fetch(self, snapshot: Optional[Tuple[Contact, ...]]) -> None:
        if snapshot is None:
            logger.error("Error: Contacts could not be retrieved.")
            return
        self._store.replace(snapshot)
        self._view.render_contacts(self._store.contacts, False)
