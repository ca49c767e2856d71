"""core/contracts/ui.py
====================

UI-facing contracts for feature views.

We keep the interface minimal and lifecycle-oriented to avoid over-constraining
Tkinter usage.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IModuleView(ABC):
    """A feature's main view, mounted into the main window."""

    @abstractmethod
    def on_show(self) -> None:
        """Called when the view becomes active/visible in the main window."""

    @abstractmethod
    def on_hide(self) -> None:
        """Called when the view is removed/hidden."""

    @abstractmethod
    def dispose(self) -> None:
        """Release resources (threads, sessions, timers). Must be idempotent."""
