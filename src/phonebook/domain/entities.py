"""Domain entities: Person and the field rules every stored Person obeys."""

import re
import unicodedata
from dataclasses import dataclass, field

# Storage-assigned ids are positive decimal integers rendered as strings.
PERSON_ID_PATTERN = re.compile(r"[1-9][0-9]*")
NUMBER_PATTERN = re.compile(r"[0-9]{10}")


class PhonebookError(Exception):
    """Base for every error raised by the phonebook core."""


class PersonValidationError(PhonebookError, ValueError):
    """One or more Person fields break the schema rules."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Invalid person field(s): {', '.join(self.fields)}")


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_name(name: str) -> bool:
    """Letters (any script, composed or with combining marks) and whitespace only,
    with at least one letter."""
    if is_blank(name):
        return False
    has_letter = False
    for ch in name:
        if ch.isalpha():
            has_letter = True
        elif not (ch.isspace() or unicodedata.category(ch).startswith("M")):
            return False
    return has_letter


def is_valid_number(number: str) -> bool:
    return NUMBER_PATTERN.fullmatch(number) is not None


def is_valid_person_id(person_id: str) -> bool:
    return PERSON_ID_PATTERN.fullmatch(person_id or "") is not None


def invalid_fields(name: str, number: str) -> list[str]:
    """Return the names of the fields that break the format rules, name first."""
    fields = []
    if not isinstance(name, str) or not is_valid_name(name):
        fields.append("name")
    if not isinstance(number, str) or not is_valid_number(number):
        fields.append("number")
    return fields


@dataclass(frozen=True)
class Person:
    """
    A phonebook entry.
    The id is assigned by storage and never changes; name and number are
    unique across the phonebook (enforced by the gate and by storage).
    """

    id: str
    name: str = field(default="")
    number: str = field(default="")

    def __post_init__(self):
        fields = invalid_fields(self.name, self.number)
        if fields:
            raise PersonValidationError(fields)
