"""
===============================================================================
SearchBar – top bar with [Add Contact] [See All Contacts?] | [Search field]
-------------------------------------------------------------------------------
Responsibility
- Emits every key release of the search field to the controller; debouncing
  happens in the controller, not here.
- The 'See All Contacts' button exists at most once and only while a tag
  filter is active.

SRP
- Pure GUI + delegation.
===============================================================================
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Optional

from contacts.dto.action_event import ActionEvent
from contacts.enum.contact_action import ContactAction


class SearchBar(ttk.Frame):
    def __init__(self, parent: tk.Widget) -> None:
        super().__init__(parent)
        self._controller: Optional[Any] = None

        self.columnconfigure(2, weight=1)

        self._btn_add = ttk.Button(self, text="Add Contact", command=self._on_add_clicked)
        self._btn_add.grid(row=0, column=0, padx=(0, 6))

        # slot for the see-all button (column 1)
        self._btn_see_all: Optional[ttk.Button] = None

        self.query = tk.StringVar()
        self.entry = ttk.Entry(self, textvariable=self.query)
        self.entry.grid(row=0, column=2, sticky="ew")
        self._key_binding: Optional[str] = None

    # --- wiring --------------------------------------------------------------
    def set_controller(self, controller: Any) -> None:
        self._controller = controller
        self._key_binding = self.entry.bind("<KeyRelease>", self._on_key_release)

    def clear_controller(self) -> None:
        if self._key_binding is not None:
            self.entry.unbind("<KeyRelease>", self._key_binding)
            self._key_binding = None
        self._controller = None

    # --- see all -------------------------------------------------------------
    def show_see_all(self) -> None:
        if self._btn_see_all is not None:
            return
        self._btn_see_all = ttk.Button(self, text="See All Contacts", command=self._on_see_all_clicked)
        self._btn_see_all.grid(row=0, column=1, padx=(0, 6))

    def hide_see_all(self) -> None:
        if self._btn_see_all is None:
            return
        self._btn_see_all.destroy()
        self._btn_see_all = None

    # --- actions -------------------------------------------------------------
    def _on_add_clicked(self) -> None:
        if self._controller is not None:
            self._controller.handle_action(ActionEvent(ContactAction.ADD))

    def _on_see_all_clicked(self) -> None:
        if self._controller is not None:
            self._controller.handle_action(ActionEvent(ContactAction.SEE_ALL))

    def _on_key_release(self, _event: tk.Event) -> None:
        if self._controller is not None:
            self._controller.on_search_input(self.query.get())
