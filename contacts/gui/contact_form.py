"""
===============================================================================
ContactForm – add / edit window for one contact
-------------------------------------------------------------------------------
Fields:
  - Full Name, Email, Phone Number (validated on blur and on submit)
  - Tag input + [Add Tag] + list of current tags with [x] buttons

Identity
  The window carries its FormId ('add_form' / 'edit_form'); every event it
  emits names that id, so the controller never relies on a shared flag.

The window is built once and withdrawn/deiconified; hide() resets it.
===============================================================================
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Dict, Iterable, List, Optional, Tuple

from contacts.dto.action_event import ActionEvent
from contacts.dto.field_validation import FieldValidation
from contacts.enum.contact_action import ContactAction
from contacts.enum.form_state import FormId
from contacts.services.field_rules import FORM_ERROR_MESSAGE, TAG_INPUT_FIELD

FIELDS: Tuple[Tuple[str, str], ...] = (
    ("full_name", "Full name"),
    ("email", "Email"),
    ("phone_number", "Phone Number"),
)


class ContactForm(tk.Toplevel):
    def __init__(self, parent: tk.Misc, *, form_id: FormId, title_text: str) -> None:
        super().__init__(parent)
        self.form_id = form_id
        self.title(title_text)
        self.transient(parent)
        self.resizable(False, False)
        self.withdraw()
        self.protocol("WM_DELETE_WINDOW", lambda: self._emit(ContactAction.CANCEL))

        self._controller: Optional[Any] = None
        self._bindings: List[Tuple[tk.Misc, str, str]] = []
        self.contact_id: Optional[int] = None

        style = ttk.Style(self)
        style.map("TEntry", fieldbackground=[("invalid", "#fde2e1")])
        style.configure("Error.TLabel", foreground="#c01c28")

        frm = ttk.Frame(self, padding=12)
        frm.grid(row=0, column=0, sticky="nsew")
        frm.columnconfigure(1, weight=1)

        self._banner = ttk.Label(frm, text="", style="Error.TLabel")
        self._banner_visible = False

        self.vars: Dict[str, tk.StringVar] = {}
        self.entries: Dict[str, ttk.Entry] = {}
        self._messages: Dict[str, ttk.Label] = {}
        row = 1
        for name, label in FIELDS:
            ttk.Label(frm, text=label).grid(row=row, column=0, sticky="w", pady=(4, 0), padx=(0, 8))
            var = tk.StringVar()
            entry = ttk.Entry(frm, textvariable=var, width=40)
            entry.grid(row=row, column=1, sticky="ew", pady=(4, 0))
            msg = ttk.Label(frm, text="", style="Error.TLabel")
            msg.grid(row=row + 1, column=1, sticky="w")
            self.vars[name], self.entries[name], self._messages[name] = var, entry, msg
            row += 2

        ttk.Label(frm, text="Tags").grid(row=row, column=0, sticky="w", pady=(8, 0), padx=(0, 8))
        tag_row = ttk.Frame(frm)
        tag_row.grid(row=row, column=1, sticky="ew", pady=(8, 0))
        tag_row.columnconfigure(0, weight=1)
        self.tag_var = tk.StringVar()
        self.tag_entry = ttk.Entry(tag_row, textvariable=self.tag_var)
        self.tag_entry.grid(row=0, column=0, sticky="ew")
        ttk.Button(tag_row, text="Add Tag",
                   command=lambda: self._emit(ContactAction.ADD_TAG, self.tag_var.get())
                   ).grid(row=0, column=1, padx=(6, 0))

        self._tag_list = ttk.Frame(frm)
        self._tag_list.grid(row=row + 1, column=1, sticky="w")
        self._tag_rows: Dict[str, ttk.Frame] = {}

        btns = ttk.Frame(frm)
        btns.grid(row=row + 2, column=0, columnspan=2, sticky="e", pady=(12, 0))
        ttk.Button(btns, text="Cancel", command=lambda: self._emit(ContactAction.CANCEL)).grid(row=0, column=0, padx=6)
        ttk.Button(btns, text="Submit", command=self._on_submit).grid(row=0, column=1, padx=6)

        self._frame = frm

    # --- wiring --------------------------------------------------------------
    def set_controller(self, controller: Any) -> None:
        self._controller = controller
        for name, entry in self.entries.items():
            self._bind(entry, "<KeyPress>", lambda e, n=name: self._on_key(n, e))
            self._bind(entry, "<FocusOut>", lambda _e, n=name: self._on_blur(n))
            self._bind(entry, "<FocusIn>", lambda _e, n=name: self._on_focus(n))
        self._bind(self.tag_entry, "<KeyPress>", lambda e: self._on_key(TAG_INPUT_FIELD, e))
        self._bind(self, "<Escape>", lambda _e: self._emit(ContactAction.CANCEL))

    def clear_controller(self) -> None:
        for widget, sequence, funcid in self._bindings:
            widget.unbind(sequence, funcid)
        self._bindings.clear()
        self._controller = None

    def _bind(self, widget: tk.Misc, sequence: str, func: Any) -> None:
        self._bindings.append((widget, sequence, widget.bind(sequence, func, add="+")))

    # --- visibility ----------------------------------------------------------
    def show(self) -> None:
        self.deiconify()
        self.lift()
        self.entries["full_name"].focus_set()

    def hide(self) -> None:
        self.withdraw()
        for var in self.vars.values():
            var.set("")
        self.tag_var.set("")
        self.set_tags(())
        self.clear_errors()
        self.contact_id = None

    # --- values --------------------------------------------------------------
    def set_values(self, values: Dict[str, str]) -> None:
        for name, var in self.vars.items():
            var.set(values.get(name, ""))

    def get_values(self) -> Dict[str, str]:
        return {name: var.get() for name, var in self.vars.items()}

    def set_target(self, contact_id: Optional[int]) -> None:
        self.contact_id = contact_id
        if contact_id is not None:
            self.title(f"Edit Contact #{contact_id}")

    # --- tags ----------------------------------------------------------------
    def set_tags(self, tags: Iterable[str]) -> None:
        for row in self._tag_rows.values():
            row.destroy()
        self._tag_rows.clear()
        for tag in tags:
            self.append_tag(tag)

    def append_tag(self, tag: str) -> None:
        row = ttk.Frame(self._tag_list)
        row.grid(row=len(self._tag_rows), column=0, sticky="w")
        ttk.Label(row, text=f"{tag} ").grid(row=0, column=0)
        ttk.Button(row, text="x", width=2,
                   command=lambda t=tag: self._emit(ContactAction.REMOVE_TAG, t)).grid(row=0, column=1)
        self._tag_rows[tag] = row

    def remove_tag(self, tag: str) -> None:
        row = self._tag_rows.pop(tag, None)
        if row is not None:
            row.destroy()

    def clear_tag_input(self) -> None:
        self.tag_var.set("")

    # --- validation display --------------------------------------------------
    def show_validation(self, validation: FieldValidation) -> None:
        entry = self.entries.get(validation.field_name)
        if entry is None:
            return
        if validation.invalid:
            entry.state(["invalid"])
            self._messages[validation.field_name].configure(text=validation.message or "")
        else:
            entry.state(["!invalid"])
            self._messages[validation.field_name].configure(text="")

    def clear_message(self, field_name: str) -> None:
        label = self._messages.get(field_name)
        if label is not None:
            label.configure(text="")

    @property
    def has_banner(self) -> bool:
        return self._banner_visible

    def show_banner(self) -> None:
        if self._banner_visible:
            return
        self._banner.configure(text=FORM_ERROR_MESSAGE)
        self._banner.grid(row=0, column=0, columnspan=2, sticky="w", pady=(0, 6))
        self._banner_visible = True

    def clear_errors(self) -> None:
        for name, entry in self.entries.items():
            entry.state(["!invalid"])
            self._messages[name].configure(text="")
        self._banner.grid_remove()
        self._banner_visible = False

    # --- events --------------------------------------------------------------
    def _emit(self, kind: ContactAction, text: str = "") -> None:
        if self._controller is not None:
            self._controller.handle_action(ActionEvent(kind, form_id=self.form_id, text=text))

    def _on_submit(self) -> None:
        if self._controller is not None:
            self._controller.submit_form(self.form_id, self.get_values())

    def _on_key(self, field_name: str, event: tk.Event) -> Optional[str]:
        if self._controller is None:
            return None
        if not self._controller.admit_keystroke(field_name, event.char, event.keysym):
            return "break"
        return None

    def _on_blur(self, field_name: str) -> None:
        # FocusOut also fires after withdraw()
        if self._controller is not None and self.winfo_viewable():
            self._controller.on_field_blur(self.form_id, field_name, self.vars[field_name].get())

    def _on_focus(self, field_name: str) -> None:
        if self._controller is not None:
            self._controller.on_field_focus(self.form_id, field_name)
