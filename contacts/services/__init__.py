"""Services layer for contacts module.

Contact cache, remote writes and field validation rules.
"""

from contacts.services.contact_store import ContactStore
from contacts.services import field_rules

__all__ = [
    "ContactStore",
    "field_rules",
]
