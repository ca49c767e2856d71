"""
Contacts feature package initializer.

Provides the factory functions the main window calls to create the contacts
view without hard-coding internals.

The factory accepts a `parent` Tk container and an optional `app_context`;
when the context carries a `config_service` attribute it is used instead of the
process-wide configuration.
"""

from typing import Optional
import tkinter as tk

FEATURE_NAME = "Contacts"


def get_feature_name() -> str:
    """Human readable feature name (used e.g. for window titles)."""
    return FEATURE_NAME


def create_feature_view(parent: tk.Misc, app_context: Optional[object] = None) -> tk.Frame:
    """
    Factory for the main contacts view.

    Args:
        parent (tk.Misc): Tk container to mount the view onto.
        app_context (object, optional): Application context (if your app passes one).

    Returns:
        tk.Frame: A fully wired contacts view. Call ``on_show()`` to load data.
    """
    from .gui.contacts_view import ContactsView

    config = getattr(app_context, "config_service", None)
    return ContactsView(parent, config=config)
