"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from phonebook.domain import Person


class PersonRepository(Protocol):
    """Persists and queries Person records.

    Operations taking an id raise MalformedIdError when the id does not have
    the shape this store assigns. Writes raise DuplicateKeyError when name or
    number is already taken, and PersonValidationError on invalid fields.
    """

    def list_all(self) -> list[Person]:
        """Return all persons in ascending id order."""
        ...

    def get_by_id(self, person_id: str) -> Person | None:
        """Return the person with the given id, or None."""
        ...

    def find_by_name(self, name: str, excluding_id: str | None = None) -> Person | None:
        """Return a person with exactly this name, other than excluding_id, or None."""
        ...

    def find_by_number(self, number: str, excluding_id: str | None = None) -> Person | None:
        """Return a person with exactly this number, other than excluding_id, or None."""
        ...

    def add(self, name: str, number: str) -> Person:
        """Store a new person and return it with its freshly assigned id."""
        ...

    def update(self, person_id: str, name: str, number: str) -> Person | None:
        """Replace name and number. Returns the updated person, or None if not found."""
        ...

    def delete(self, person_id: str) -> bool:
        """Remove the person. Returns True if deleted, False if not found."""
        ...

    def count(self) -> int:
        ...
