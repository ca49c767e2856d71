"""FieldValidation DTO – derived validity of a single form input."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FieldValidation:
    """
    Immutable result of validating one input value.

    Never stored; recomputed on blur and on submit.
    """

    field_name: str
    invalid: bool
    message: Optional[str] = None

    @staticmethod
    def valid(field_name: str) -> "FieldValidation":
        return FieldValidation(field_name=field_name, invalid=False, message=None)
