"""In-memory implementation of PersonRepository (no DB)."""

import threading

from phonebook.application.errors import DuplicateKeyError, MalformedIdError
from phonebook.domain import Person, is_valid_person_id


class InMemoryPersonRepository:
    """Stores persons in memory, ordered by id.

    Ids come from a counter that only moves forward, so a deleted id is never
    handed out again. Writes re-check uniqueness under the lock.
    """

    def __init__(self, persons: list[tuple[str, str]] | None = None) -> None:
        self._lock = threading.Lock()
        self._by_id: dict[str, Person] = {}
        self._last_id = 0
        for name, number in persons or []:
            self.add(name, number)

    @staticmethod
    def _check_id(person_id: str) -> None:
        if not is_valid_person_id(person_id):
            raise MalformedIdError(person_id)

    def _find(self, field: str, value: str, excluding_id: str | None) -> Person | None:
        for person in self._by_id.values():
            if person.id != excluding_id and getattr(person, field) == value:
                return person
        return None

    def _ensure_unique(self, name: str, number: str, excluding_id: str | None) -> None:
        if self._find("name", name, excluding_id) is not None:
            raise DuplicateKeyError("name", name)
        if self._find("number", number, excluding_id) is not None:
            raise DuplicateKeyError("number", number)

    def list_all(self) -> list[Person]:
        with self._lock:
            return list(self._by_id.values())

    def get_by_id(self, person_id: str) -> Person | None:
        self._check_id(person_id)
        with self._lock:
            return self._by_id.get(person_id)

    def find_by_name(self, name: str, excluding_id: str | None = None) -> Person | None:
        with self._lock:
            return self._find("name", name, excluding_id)

    def find_by_number(self, number: str, excluding_id: str | None = None) -> Person | None:
        with self._lock:
            return self._find("number", number, excluding_id)

    def add(self, name: str, number: str) -> Person:
        with self._lock:
            person = Person(id=str(self._last_id + 1), name=name, number=number)
            self._ensure_unique(name, number, excluding_id=None)
            self._last_id += 1
            self._by_id[person.id] = person
            return person

    def update(self, person_id: str, name: str, number: str) -> Person | None:
        self._check_id(person_id)
        with self._lock:
            if person_id not in self._by_id:
                return None
            person = Person(id=person_id, name=name, number=number)
            self._ensure_unique(name, number, excluding_id=person_id)
            self._by_id[person_id] = person
            return person

    def delete(self, person_id: str) -> bool:
        self._check_id(person_id)
        with self._lock:
            return self._by_id.pop(person_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._by_id)
