"""Faults signaled by storage adapters. Part of the PersonRepository contract."""

from phonebook.domain import PhonebookError


class StorageError(PhonebookError):
    """Base for storage-raised faults the classifier knows about."""


class MalformedIdError(StorageError):
    """The id does not have the shape storage assigns."""

    def __init__(self, person_id: str) -> None:
        self.person_id = person_id
        super().__init__(f"Malformed person id: {person_id!r}")


class DuplicateKeyError(StorageError):
    """A write would break a uniqueness constraint on `field`."""

    def __init__(self, field: str, value: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Duplicate value for unique field {field!r}")
