"""Data passed across the application boundary: candidates and results."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class PersonData:
    """A proposed name/number pair, as received from a caller. Fields may be missing."""

    name: str | None = None
    number: str | None = None


class AdmissionMode(Enum):
    CREATE = "create"
    UPDATE = "update"


class RejectionKind(Enum):
    """Every reason a request on a person can fail."""

    CONTENT_MISSING = "content_missing"
    DUPLICATE_NAME = "duplicate_name"
    DUPLICATE_NUMBER = "duplicate_number"
    MALFORMED_ID = "malformed_id"
    FORMAT_VALIDATION = "format_validation"
    NOT_FOUND = "not_found"
    ALREADY_DELETED = "already_deleted"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class Rejection:
    """Terminal, reportable failure. fields is only set for FORMAT_VALIDATION."""

    kind: RejectionKind
    fields: tuple[str, ...] = ()


@dataclass(frozen=True)
class PersonDeleted:
    person_id: str


@dataclass(frozen=True)
class ErrorResponse:
    status_code: int
    body: dict
