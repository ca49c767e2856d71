"""contacts/enum/contact_action.py
================================

Canonical action identifiers for interactive elements of the contacts view.

Every button or link declares one of these kinds when it is created; the
InteractionController dispatches on the kind instead of inspecting widget
names or styles.
"""
from __future__ import annotations

from enum import Enum


class ContactAction(str, Enum):
    """Supported user actions."""

    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"
    CANCEL = "cancel"

    ADD_TAG = "add_tag"
    REMOVE_TAG = "remove_tag"

    FILTER_TAG = "filter_tag"
    SEE_ALL = "see_all"
