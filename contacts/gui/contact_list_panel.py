"""
===============================================================================
ContactListPanel – scrollable list of contact cards
-------------------------------------------------------------------------------
Each card shows name, phone, email and the tags as clickable links, plus
Edit / Delete buttons. Every interactive element is created with the
ActionEvent it emits, so the controller never has to guess what was clicked.

When there is nothing to list, a single message label replaces the cards.
===============================================================================
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Optional, Sequence

from contacts.dto.action_event import ActionEvent
from contacts.enum.contact_action import ContactAction
from contacts.models.contact import Contact


class ContactListPanel(ttk.Frame):
    def __init__(self, parent: tk.Widget) -> None:
        super().__init__(parent)
        self._dispatch: Optional[Callable[[ActionEvent], Any]] = None

        # Layout: allow growth
        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0)
        vsb = ttk.Scrollbar(self, orient="vertical", command=self._canvas.yview)
        self._canvas.configure(yscrollcommand=vsb.set)
        self._canvas.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")

        self.body = ttk.Frame(self._canvas)
        self.body.columnconfigure(0, weight=1)
        self._window = self._canvas.create_window((0, 0), window=self.body, anchor="nw")
        self.body.bind("<Configure>", lambda _e: self._canvas.configure(scrollregion=self._canvas.bbox("all")))
        self._canvas.bind("<Configure>", lambda e: self._canvas.itemconfigure(self._window, width=e.width))

        style = ttk.Style(self)
        style.configure("TagLink.TLabel", foreground="#1a5fb4", font=("Segoe UI", 9, "underline"))
        style.configure("Empty.TLabel", font=("Segoe UI", 14, "bold"))

    # wiring
    def set_dispatch(self, dispatch: Optional[Callable[[ActionEvent], Any]]) -> None:
        self._dispatch = dispatch

    # data rendering
    def render_contacts(self, contacts: Sequence[Contact]) -> None:
        self._clear()
        for row, contact in enumerate(contacts):
            self._build_card(contact).grid(row=row, column=0, sticky="ew", padx=8, pady=4)

    def render_message(self, message: str) -> None:
        self._clear()
        ttk.Label(self.body, text=message, style="Empty.TLabel").grid(row=0, column=0, pady=24)

    # helpers
    def _clear(self) -> None:
        for child in self.body.winfo_children():
            child.destroy()
        self._canvas.yview_moveto(0)

    def _build_card(self, contact: Contact) -> ttk.Frame:
        card = ttk.Frame(self.body, padding=8, relief="groove")
        card.columnconfigure(1, weight=1)

        ttk.Label(card, text=contact.full_name, font=("Segoe UI", 12, "bold")).grid(
            row=0, column=0, columnspan=2, sticky="w")
        ttk.Label(card, text="Phone Number:").grid(row=1, column=0, sticky="w")
        ttk.Label(card, text=contact.phone_number).grid(row=1, column=1, sticky="w")
        ttk.Label(card, text="Email:").grid(row=2, column=0, sticky="w")
        ttk.Label(card, text=contact.email).grid(row=2, column=1, sticky="w")

        if contact.tags:
            ttk.Label(card, text="Tags:").grid(row=3, column=0, sticky="w")
            tags = ttk.Frame(card)
            tags.grid(row=3, column=1, sticky="w")
            for col, tag in enumerate(contact.tags):
                link = ttk.Label(tags, text=tag, style="TagLink.TLabel", cursor="hand2")
                link.grid(row=0, column=col, padx=(0, 6))
                link.bind("<Button-1>", self._emit_on_click(ActionEvent(ContactAction.FILTER_TAG, text=tag)))

        buttons = ttk.Frame(card)
        buttons.grid(row=0, column=2, rowspan=3, sticky="ne")
        ttk.Button(buttons, text="Edit",
                   command=self._emit(ActionEvent(ContactAction.EDIT, contact_id=str(contact.id)))
                   ).grid(row=0, column=0, padx=2)
        ttk.Button(buttons, text="Delete",
                   command=self._emit(ActionEvent(ContactAction.DELETE, contact_id=str(contact.id)))
                   ).grid(row=0, column=1, padx=2)
        return card

    def _emit(self, event: ActionEvent) -> Callable[[], None]:
        def fire() -> None:
            if self._dispatch is not None:
                self._dispatch(event)
        return fire

    def _emit_on_click(self, event: ActionEvent) -> Callable[[tk.Event], None]:
        fire = self._emit(event)
        return lambda _e: fire()
