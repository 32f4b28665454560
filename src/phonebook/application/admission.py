"""Validation and uniqueness gate for candidate Person records.

Cheap local checks run first; storage is only consulted (read-only) once the
candidate is well formed. Writes are never issued from here.
"""

import logging

from phonebook.application.dto import AdmissionMode, PersonData, Rejection, RejectionKind
from phonebook.application.ports import PersonRepository
from phonebook.domain import invalid_fields, is_blank

logger = logging.getLogger(__name__)


class AdmissionGate:
    """Decides whether a candidate may be inserted or may replace an existing record."""

    def __init__(self, repository: PersonRepository) -> None:
        self._repo = repository

    @staticmethod
    def validate_format(candidate: PersonData) -> Rejection | None:
        """Return a rejection if a field is missing or malformed, else None.

        All malformed fields are reported together; missing content wins over
        format errors.
        """
        if is_blank(candidate.name) or is_blank(candidate.number):
            return Rejection(RejectionKind.CONTENT_MISSING)
        fields = invalid_fields(candidate.name, candidate.number)
        if fields:
            return Rejection(RejectionKind.FORMAT_VALIDATION, fields=tuple(fields))
        return None

    def check_uniqueness(
        self, candidate: PersonData, excluding_id: str | None = None
    ) -> Rejection | None:
        """Name is checked before number; the first clash wins."""
        if self._repo.find_by_name(candidate.name, excluding_id=excluding_id) is not None:
            return Rejection(RejectionKind.DUPLICATE_NAME)
        if self._repo.find_by_number(candidate.number, excluding_id=excluding_id) is not None:
            return Rejection(RejectionKind.DUPLICATE_NUMBER)
        return None

    def admit(
        self,
        candidate: PersonData,
        mode: AdmissionMode = AdmissionMode.CREATE,
        target_id: str | None = None,
    ) -> PersonData | Rejection:
        """Approve the candidate (returned unchanged) or return why it was rejected.

        On update the target must exist and its own record is excluded from
        the uniqueness lookups, so re-saving unchanged values is allowed.
        """
        rejection = self.validate_format(candidate)
        if rejection is None and mode is AdmissionMode.UPDATE:
            if target_id is None:
                raise ValueError("target_id is required when admitting an update")
            if self._repo.get_by_id(target_id) is None:
                rejection = Rejection(RejectionKind.NOT_FOUND)
        if rejection is None:
            excluding_id = target_id if mode is AdmissionMode.UPDATE else None
            rejection = self.check_uniqueness(candidate, excluding_id=excluding_id)
        if rejection is not None:
            logger.info("Rejected %s of %r: %s", mode.value, candidate.name, rejection.kind.value)
            return rejection
        return candidate
