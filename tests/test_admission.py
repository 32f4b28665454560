"""Unit tests for AdmissionGate: format checks, uniqueness order, update exclusion."""

import pytest

from phonebook.application import (
    AdmissionGate,
    AdmissionMode,
    MalformedIdError,
    PersonData,
    Rejection,
    RejectionKind,
)
from phonebook.infrastructure import InMemoryPersonRepository


class CountingRepository(InMemoryPersonRepository):
    """Records lookups so tests can assert storage was not consulted."""

    def __init__(self, persons=None) -> None:
        super().__init__(persons)
        self.lookups = 0

    def find_by_name(self, name, excluding_id=None):
        self.lookups += 1
        return super().find_by_name(name, excluding_id)

    def find_by_number(self, number, excluding_id=None):
        self.lookups += 1
        return super().find_by_number(number, excluding_id)

    def get_by_id(self, person_id):
        self.lookups += 1
        return super().get_by_id(person_id)


def _gate(*persons: tuple[str, str]) -> tuple[AdmissionGate, CountingRepository]:
    repo = CountingRepository(list(persons))
    return AdmissionGate(repo), repo


@pytest.mark.parametrize(
    "name, number",
    [
        (None, "3944532352"),
        ("Ada Lovelace", None),
        ("", "3944532352"),
        ("Ada Lovelace", ""),
        ("   ", "3944532352"),
    ],
)
def test_missing_content(name, number) -> None:
    rejection = AdmissionGate.validate_format(PersonData(name=name, number=number))
    assert rejection == Rejection(RejectionKind.CONTENT_MISSING)


def test_name_with_digits_is_format_error() -> None:
    rejection = AdmissionGate.validate_format(PersonData(name="A1", number="3944532352"))
    assert rejection == Rejection(RejectionKind.FORMAT_VALIDATION, fields=("name",))


@pytest.mark.parametrize("number", ["123456789", "12345678901", "39-4453235", "394453235a", " 3944532352"])
def test_number_must_be_exactly_ten_digits(number) -> None:
    rejection = AdmissionGate.validate_format(PersonData(name="Ada", number=number))
    assert rejection == Rejection(RejectionKind.FORMAT_VALIDATION, fields=("number",))


def test_all_format_violations_reported_together() -> None:
    rejection = AdmissionGate.validate_format(PersonData(name="R2D2", number="040-123456"))
    assert rejection is not None
    assert rejection.fields == ("name", "number")


def test_valid_format_passes() -> None:
    assert AdmissionGate.validate_format(PersonData(name="Zoë  Smith", number="0401234567")) is None


def test_format_errors_never_touch_storage() -> None:
    gate, repo = _gate(("Ada Lovelace", "3944532352"))
    result = gate.admit(PersonData(name="Ada Lovelace", number="12"))
    assert isinstance(result, Rejection)
    assert result.kind is RejectionKind.FORMAT_VALIDATION
    assert repo.lookups == 0


def test_duplicate_name_checked_before_number() -> None:
    gate, _ = _gate(("Ada Lovelace", "3944532352"))
    result = gate.admit(PersonData(name="Ada Lovelace", number="3944532352"))
    assert result == Rejection(RejectionKind.DUPLICATE_NAME)


def test_duplicate_number() -> None:
    gate, _ = _gate(("Ada Lovelace", "3944532352"))
    result = gate.admit(PersonData(name="Dan Abramov", number="3944532352"))
    assert result == Rejection(RejectionKind.DUPLICATE_NUMBER)


def test_name_match_is_exact() -> None:
    gate, _ = _gate(("Ada Lovelace", "3944532352"))
    assert gate.check_uniqueness(PersonData(name="ada lovelace", number="1234567890")) is None
    assert gate.check_uniqueness(PersonData(name="Ada Lovelace ", number="1234567890")) is None


def test_admit_create_returns_candidate() -> None:
    gate, _ = _gate()
    candidate = PersonData(name="Ada Lovelace", number="3944532352")
    assert gate.admit(candidate, AdmissionMode.CREATE) == candidate


def test_update_excludes_own_record() -> None:
    gate, _ = _gate(("Ada Lovelace", "3944532352"))
    candidate = PersonData(name="Ada Lovelace", number="3944532352")
    assert gate.admit(candidate, AdmissionMode.UPDATE, target_id="1") == candidate


def test_update_still_rejects_other_records() -> None:
    gate, _ = _gate(("Ada Lovelace", "3944532352"), ("Dan Abramov", "1243234345"))
    result = gate.admit(
        PersonData(name="Dan Abramov", number="3944532352"), AdmissionMode.UPDATE, target_id="1"
    )
    assert result == Rejection(RejectionKind.DUPLICATE_NAME)


def test_update_of_missing_target_is_not_found() -> None:
    gate, _ = _gate(("Ada Lovelace", "3944532352"))
    result = gate.admit(
        PersonData(name="Dan Abramov", number="1243234345"), AdmissionMode.UPDATE, target_id="7"
    )
    assert result == Rejection(RejectionKind.NOT_FOUND)


def test_update_with_malformed_id_raises() -> None:
    gate, _ = _gate()
    with pytest.raises(MalformedIdError):
        gate.admit(PersonData(name="Ada", number="3944532352"), AdmissionMode.UPDATE, target_id="abc")


def test_update_requires_target_id() -> None:
    gate, _ = _gate()
    with pytest.raises(ValueError):
        gate.admit(PersonData(name="Ada", number="3944532352"), AdmissionMode.UPDATE)


def test_name_with_combining_marks_passes() -> None:
    # "Zoë" spelled as "e" followed by COMBINING DIAERESIS (NFD).
    decomposed = PersonData(name="Zoe\u0308 Smith", number="3944532352")
    assert AdmissionGate.validate_format(decomposed) is None


def test_name_of_only_combining_marks_is_format_error() -> None:
    rejection = AdmissionGate.validate_format(PersonData(name="\u0308\u0301", number="3944532352"))
    assert rejection == Rejection(RejectionKind.FORMAT_VALIDATION, fields=("name",))
