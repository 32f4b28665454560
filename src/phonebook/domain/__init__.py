"""Domain layer: entities and value rules. No dependencies on outer layers."""

from phonebook.domain.entities import (
    Person,
    PersonValidationError,
    PhonebookError,
    invalid_fields,
    is_blank,
    is_valid_person_id,
)

__all__ = [
    "Person",
    "PersonValidationError",
    "PhonebookError",
    "invalid_fields",
    "is_blank",
    "is_valid_person_id",
]
