"""
Phonebook core: clean-architecture layout.

- domain: the Person entity and its field rules. No outer dependencies.
- application: admission gate, error classifier, PhonebookService, ports, DTOs.
- infrastructure: adapters (InMemoryPersonRepository, Neo4jPersonRepository).
"""

from phonebook.application import (
    AdmissionGate,
    AdmissionMode,
    DuplicateKeyError,
    ErrorResponse,
    MalformedIdError,
    PersonData,
    PersonDeleted,
    PersonRepository,
    PhonebookService,
    Rejection,
    RejectionKind,
    classify,
)
from phonebook.domain import Person, PersonValidationError, PhonebookError
from phonebook.infrastructure import InMemoryPersonRepository, Neo4jPersonRepository

__all__ = [
    "AdmissionGate",
    "AdmissionMode",
    "DuplicateKeyError",
    "ErrorResponse",
    "InMemoryPersonRepository",
    "MalformedIdError",
    "Neo4jPersonRepository",
    "Person",
    "PersonData",
    "PersonDeleted",
    "PersonRepository",
    "PersonValidationError",
    "PhonebookError",
    "PhonebookService",
    "Rejection",
    "RejectionKind",
    "classify",
]
