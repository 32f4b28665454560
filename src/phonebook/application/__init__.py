"""Application layer: use cases, gate, classifier, ports, and DTOs. Depends only on domain."""

from phonebook.application.admission import AdmissionGate
from phonebook.application.classifier import classify, rejection_from_exception
from phonebook.application.dto import (
    AdmissionMode,
    ErrorResponse,
    PersonData,
    PersonDeleted,
    Rejection,
    RejectionKind,
)
from phonebook.application.errors import DuplicateKeyError, MalformedIdError, StorageError
from phonebook.application.phonebook_service import PhonebookService
from phonebook.application.ports import PersonRepository

__all__ = [
    "AdmissionGate",
    "AdmissionMode",
    "DuplicateKeyError",
    "ErrorResponse",
    "MalformedIdError",
    "PersonData",
    "PersonDeleted",
    "PersonRepository",
    "PhonebookService",
    "Rejection",
    "RejectionKind",
    "StorageError",
    "classify",
    "rejection_from_exception",
]
