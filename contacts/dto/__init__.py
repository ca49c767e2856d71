"""Data Transfer Objects for contacts module.

DTOs carry data between the presenter, the controller and the store.
"""

from contacts.dto.action_event import ActionEvent
from contacts.dto.field_validation import FieldValidation
from contacts.dto.pending_edit import PendingEdit
from contacts.dto.render_outcome import RenderOutcome, resolve_render_outcome

__all__ = [
    "ActionEvent",
    "FieldValidation",
    "PendingEdit",
    "RenderOutcome",
    "resolve_render_outcome",
]
