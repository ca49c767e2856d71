"""
contacts/tests/fakes.py

In-memory collaborators for the contacts tests: a virtual-clock scheduler,
a scripted ContactApi and a recording presenter. No Tk, no network.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from contacts.controllers.presenter_contract import IContactsPresenter
from contacts.dto.field_validation import FieldValidation
from contacts.dto.pending_edit import PendingEdit
from contacts.dto.render_outcome import RenderOutcome, resolve_render_outcome
from contacts.enum.form_state import FormId
from contacts.exceptions.errors import NetworkFailure
from contacts.models.contact import Contact


class FakeScheduler:
    """after/after_cancel on a manually advanced clock."""

    def __init__(self) -> None:
        self.now = 0
        self._seq = 0
        self._jobs: Dict[str, Tuple[int, Callable[..., Any], Tuple[Any, ...]]] = {}

    def after(self, ms: int, func: Callable[..., Any], *args: Any) -> str:
        self._seq += 1
        job_id = f"after#{self._seq}"
        self._jobs[job_id] = (self.now + ms, func, args)
        return job_id

    def after_cancel(self, id: str) -> None:
        self._jobs.pop(id, None)

    @property
    def pending(self) -> int:
        return len(self._jobs)

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while True:
            due = sorted(
                (when, job_id) for job_id, (when, _f, _a) in self._jobs.items() if when <= target
            )
            if not due:
                break
            when, job_id = due[0]
            _when, func, args = self._jobs.pop(job_id)
            self.now = when
            func(*args)
        self.now = target


class FakeContactApi:
    """Scripted ContactApi recording every call."""

    def __init__(self, contacts: Sequence[Mapping[str, Any]] = ()) -> None:
        self.contacts: List[Dict[str, Any]] = [dict(c) for c in contacts]
        self.calls: List[Tuple[str, Any]] = []
        self.fail: set[str] = set()

    def _maybe_fail(self, op: str) -> None:
        if op in self.fail:
            raise NetworkFailure(f"{op} failed", status_code=500)

    def list_contacts(self) -> List[Dict[str, Any]]:
        self.calls.append(("list", None))
        self._maybe_fail("list")
        return [dict(c) for c in self.contacts]

    def create_contact(self, payload: Mapping[str, str]) -> None:
        self.calls.append(("create", dict(payload)))
        self._maybe_fail("create")
        new_id = max((int(c["id"]) for c in self.contacts), default=0) + 1
        self.contacts.append({"id": new_id, **payload})

    def update_contact(self, contact_id: int, payload: Mapping[str, str]) -> None:
        self.calls.append(("update", (contact_id, dict(payload))))
        self._maybe_fail("update")
        for c in self.contacts:
            if int(c["id"]) == contact_id:
                c.update(payload)

    def delete_contact(self, contact_id: int) -> None:
        self.calls.append(("delete", contact_id))
        self._maybe_fail("delete")
        self.contacts = [c for c in self.contacts if int(c["id"]) != contact_id]

    def ops(self) -> List[str]:
        return [op for op, _ in self.calls]


class RecordingPresenter(IContactsPresenter):
    """Presenter that records what would have been shown."""

    def __init__(self, *, confirm_answer: bool = True) -> None:
        self.confirm_answer = confirm_answer
        self.bound_to: Optional[Any] = None
        self.bind_count = 0
        self.unbind_count = 0
        self.renders: List[Tuple[Tuple[Contact, ...], bool, RenderOutcome]] = []
        self.see_all_visible = False
        self.open_forms: Dict[FormId, Any] = {}
        self.form_tags: Dict[FormId, List[str]] = {}
        self.tag_inputs_cleared: List[FormId] = []
        self.validations: List[Tuple[FormId, FieldValidation]] = []
        self.cleared_messages: List[Tuple[FormId, str]] = []
        self.banners: Dict[FormId, int] = {}
        self.alerts: List[str] = []
        self.warnings: List[str] = []
        self.confirmations: List[str] = []

    # wiring
    def bind_handlers(self, controller: Any) -> None:
        self.bound_to = controller
        self.bind_count += 1

    def unbind_handlers(self) -> None:
        self.bound_to = None
        self.unbind_count += 1

    # collection
    def render_contacts(self, contacts: Sequence[Contact], is_search_result: bool) -> RenderOutcome:
        outcome = resolve_render_outcome(contacts, is_search_result)
        self.renders.append((tuple(contacts), is_search_result, outcome))
        return outcome

    def show_see_all(self) -> None:
        self.see_all_visible = True

    def hide_see_all(self) -> None:
        self.see_all_visible = False

    # forms
    def show_add_form(self, pending: PendingEdit) -> None:
        self.open_forms[FormId.ADD] = None
        self.form_tags[FormId.ADD] = list(pending.tags)

    def render_edit_form(self, contact: Contact, pending: PendingEdit) -> None:
        self.open_forms[FormId.EDIT] = contact
        self.form_tags[FormId.EDIT] = list(pending.tags)

    def hide_form(self, form_id: FormId) -> None:
        self.open_forms.pop(form_id, None)
        self.form_tags.pop(form_id, None)
        self.banners.pop(form_id, None)

    def append_tag(self, form_id: FormId, tag: str) -> None:
        self.form_tags.setdefault(form_id, []).append(tag)

    def remove_tag(self, form_id: FormId, tag: str) -> None:
        self.form_tags[form_id].remove(tag)

    def clear_tag_input(self, form_id: FormId) -> None:
        self.tag_inputs_cleared.append(form_id)

    # validation display
    def show_field_validation(self, form_id: FormId, validation: FieldValidation) -> None:
        self.validations.append((form_id, validation))

    def clear_field_message(self, form_id: FormId, field_name: str) -> None:
        self.cleared_messages.append((form_id, field_name))

    def has_form_error(self, form_id: FormId) -> bool:
        return self.banners.get(form_id, 0) > 0

    def show_form_error(self, form_id: FormId) -> None:
        self.banners[form_id] = self.banners.get(form_id, 0) + 1

    # notifications
    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        return self.confirm_answer

    # helpers
    @property
    def last_render(self) -> Tuple[Tuple[Contact, ...], bool, RenderOutcome]:
        return self.renders[-1]


SAMPLE_CONTACTS: List[Dict[str, Any]] = [
    {"id": 1, "full_name": "Naveen Kumar", "phone_number": "555-123-4567",
     "email": "naveen@example.com", "tags": "work,friends"},
    {"id": 2, "full_name": "Victor Reyes", "phone_number": "5551234568",
     "email": "victor@example.com", "tags": "friends"},
    {"id": 3, "full_name": "nina Park", "phone_number": "555-000-1111",
     "email": "nina@example.com", "tags": None},
]
