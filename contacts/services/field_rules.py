"""
===============================================================================
Field rules – presence/pattern validation and keystroke admission
-------------------------------------------------------------------------------
Validation
    A field is invalid iff it is required and empty, or non-empty and not
    matching its pattern. Messages are derived from the humanized field name:
        full_name + required  -> "Full Name is a required field."
        email     + pattern   -> "Email is not valid."

Keystroke admission
    Deny-list applied BEFORE a character reaches the input:
        full_name     letters, apostrophe, space only
        phone_number  digits and hyphen only
        email         no whitespace
        tag input     no comma (tag delimiter), no space
    BackSpace is always admitted; keys without a printable character
    (arrows, Tab, modifiers) are admitted as well.

SRP
    Pure functions, no Tk imports.
===============================================================================
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Pattern

from contacts.dto.field_validation import FieldValidation

TAG_INPUT_FIELD = "tag_input"
SEARCH_FIELD = "search"

REQUIRED_SUFFIX = " is a required field."
PATTERN_SUFFIX = " is not valid."
FORM_ERROR_MESSAGE = "Fix errors before submitting this form."


@dataclass(frozen=True)
class FieldRule:
    required: bool = True
    pattern: Optional[Pattern[str]] = None


FIELD_RULES: Dict[str, FieldRule] = {
    "full_name": FieldRule(required=True, pattern=re.compile(r"^[A-Za-z' ]+$")),
    "phone_number": FieldRule(required=True, pattern=re.compile(r"^\d{3}-?\d{3}-?\d{4}$")),
    "email": FieldRule(required=True, pattern=re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")),
}

_ADMIT_NAME = re.compile(r"[a-z' ]", re.IGNORECASE)
_ADMIT_PHONE = re.compile(r"[0-9\-]")
_WHITESPACE = re.compile(r"\s")


def humanize_field_name(name: str) -> str:
    """'phone_number' -> 'Phone Number', 'email' -> 'Email'."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split("_") if word)


def validate_field(name: str, value: str) -> FieldValidation:
    rule = FIELD_RULES.get(name)
    if rule is None:
        return FieldValidation.valid(name)
    if value == "":
        if rule.required:
            return FieldValidation(name, True, humanize_field_name(name) + REQUIRED_SUFFIX)
        return FieldValidation.valid(name)
    if rule.pattern is not None and not rule.pattern.match(value):
        return FieldValidation(name, True, humanize_field_name(name) + PATTERN_SUFFIX)
    return FieldValidation.valid(name)


def validate_form(fields: Mapping[str, str]) -> Dict[str, FieldValidation]:
    """Validate every ruled field of a form; missing fields count as empty."""
    return {name: validate_field(name, fields.get(name, "")) for name in FIELD_RULES}


def form_is_valid(results: Mapping[str, FieldValidation]) -> bool:
    return not any(r.invalid for r in results.values())


def admit_keystroke(field_name: str, char: str, keysym: str = "") -> bool:
    """
    Decide whether a key press may reach the input.

    Args:
        field_name: logical name of the focused input (see FIELD_RULES,
            TAG_INPUT_FIELD)
        char: printable character produced by the key ('' for control keys)
        keysym: Tk key symbol, e.g. 'BackSpace'
    """
    if keysym == "BackSpace" or char == "\b":
        return True
    if char == "" or not char.isprintable():
        return True

    if field_name == "full_name":
        return bool(_ADMIT_NAME.fullmatch(char))
    if field_name == "phone_number":
        return bool(_ADMIT_PHONE.fullmatch(char))
    if field_name == "email":
        return not _WHITESPACE.search(char)
    if field_name == TAG_INPUT_FIELD:
        return char not in (",", " ")
    return True
