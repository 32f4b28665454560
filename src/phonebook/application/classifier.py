"""Map rejections and storage faults to HTTP-facing error responses.

Every failure lands on exactly one RejectionKind; anything unrecognized is
UNCLASSIFIED and answered with a generic 500.
"""

import logging

from phonebook.application.dto import ErrorResponse, Rejection, RejectionKind
from phonebook.application.errors import DuplicateKeyError, MalformedIdError
from phonebook.domain import PersonValidationError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "person not found"

RESPONSES: dict[RejectionKind, tuple[int, str]] = {
    RejectionKind.CONTENT_MISSING: (400, "content missing"),
    RejectionKind.DUPLICATE_NAME: (400, "name must be unique"),
    RejectionKind.DUPLICATE_NUMBER: (400, "duplicate phone number"),
    RejectionKind.MALFORMED_ID: (400, "malformatted id"),
    RejectionKind.FORMAT_VALIDATION: (400, "format validation error"),
    RejectionKind.NOT_FOUND: (400, NOT_FOUND_MESSAGE),
    RejectionKind.ALREADY_DELETED: (400, NOT_FOUND_MESSAGE),
    RejectionKind.UNCLASSIFIED: (500, "Something went wrong"),
}

_DUPLICATE_FIELD_KINDS = {
    "name": RejectionKind.DUPLICATE_NAME,
    "number": RejectionKind.DUPLICATE_NUMBER,
}


def rejection_from_exception(exc: BaseException) -> Rejection:
    """Translate a fault raised by storage or the domain into a Rejection."""
    if isinstance(exc, MalformedIdError):
        return Rejection(RejectionKind.MALFORMED_ID)

    if isinstance(exc, PersonValidationError):
        return Rejection(RejectionKind.FORMAT_VALIDATION, fields=tuple(exc.fields))

    if isinstance(exc, DuplicateKeyError):
        kind = _DUPLICATE_FIELD_KINDS.get(exc.field)
        if kind is not None:
            # Uniqueness enforced by storage after the gate's pre-check passed.
            logger.info("Storage rejected duplicate %s", exc.field)
            return Rejection(kind)
        logger.warning("Duplicate key on unexpected field %r", exc.field)
        return Rejection(RejectionKind.UNCLASSIFIED)

    logger.error("Unclassified failure: %s", exc, exc_info=exc)
    return Rejection(RejectionKind.UNCLASSIFIED)


def classify(failure: Rejection | BaseException) -> ErrorResponse:
    """Return the status code and JSON body for a failure."""
    if isinstance(failure, Rejection):
        rejection = failure
    else:
        rejection = rejection_from_exception(failure)

    status_code, message = RESPONSES.get(rejection.kind, RESPONSES[RejectionKind.UNCLASSIFIED])
    body: dict = {"error": message}
    if rejection.kind is RejectionKind.FORMAT_VALIDATION:
        body["fields"] = list(rejection.fields)
    return ErrorResponse(status_code=status_code, body=body)
