"""Form identity and per-form lifecycle states."""
from __future__ import annotations

from enum import Enum


class FormId(str, Enum):
    """Stable identifier carried by each contact form."""

    ADD = "add_form"
    EDIT = "edit_form"


class FormState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
