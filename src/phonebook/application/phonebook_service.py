"""Phonebook use cases: list, get, create, update, delete, count."""

import logging

from phonebook.application.admission import AdmissionGate
from phonebook.application.dto import (
    AdmissionMode,
    PersonData,
    PersonDeleted,
    Rejection,
    RejectionKind,
)
from phonebook.application.ports import PersonRepository
from phonebook.domain import Person

logger = logging.getLogger(__name__)


class PhonebookService:
    """Runs candidates through the gate and delegates approved writes to storage.

    Storage faults (malformed ids, constraint violations) propagate to the
    caller for classification.
    """

    def __init__(self, repository: PersonRepository) -> None:
        self._repo = repository
        self._gate = AdmissionGate(repository)

    def list_persons(self) -> list[Person]:
        return self._repo.list_all()

    def count_persons(self) -> int:
        return self._repo.count()

    def get_person(self, person_id: str) -> Person | Rejection:
        person = self._repo.get_by_id(person_id)
        if person is None:
            return Rejection(RejectionKind.NOT_FOUND)
        return person

    def create_person(self, name: str | None, number: str | None) -> Person | Rejection:
        approved = self._gate.admit(PersonData(name=name, number=number), AdmissionMode.CREATE)
        if isinstance(approved, Rejection):
            return approved
        person = self._repo.add(approved.name, approved.number)
        logger.info("Person created id=%s", person.id)
        return person

    def update_person(
        self, person_id: str, name: str | None, number: str | None
    ) -> Person | Rejection:
        approved = self._gate.admit(
            PersonData(name=name, number=number),
            AdmissionMode.UPDATE,
            target_id=person_id,
        )
        if isinstance(approved, Rejection):
            return approved
        person = self._repo.update(person_id, approved.name, approved.number)
        if person is None:
            # Deleted between the gate's lookup and the write.
            return Rejection(RejectionKind.NOT_FOUND)
        logger.info("Person updated id=%s", person.id)
        return person

    def delete_person(self, person_id: str) -> PersonDeleted | Rejection:
        """Deleting an id that is not (or no longer) stored is an error."""
        if not self._repo.delete(person_id):
            return Rejection(RejectionKind.ALREADY_DELETED)
        logger.info("Person deleted id=%s", person_id)
        return PersonDeleted(person_id=person_id)
