"""Controllers for contacts module.

Coordinate UI actions and the contact store.
Testable, no tkinter dependencies.
"""

from contacts.controllers.debouncer import Debouncer
from contacts.controllers.interaction_controller import InteractionController
from contacts.controllers.presenter_contract import IContactsPresenter
from contacts.controllers.task_runner import InlineTaskRunner, ThreadedTaskRunner

__all__ = [
    "Debouncer",
    "InteractionController",
    "IContactsPresenter",
    "InlineTaskRunner",
    "ThreadedTaskRunner",
]
