"""Tests for form validation rules."""

import pytest

from seminar_registration.domain.registration import RegistrationDraft
from seminar_registration.services.validation import clean_phone, validate_draft
from tests.conftest import VALID_FIELDS


def test_valid_draft_has_no_errors() -> None:
    result = validate_draft(RegistrationDraft(**VALID_FIELDS))

    assert result.valid
    assert result.field_errors == {}


def test_empty_draft_reports_every_required_field() -> None:
    result = validate_draft(RegistrationDraft())

    assert not result.valid
    assert set(result.field_errors) == {"full_name", "email", "phone", "seminar_topic"}
    assert all(result.field_errors.values())


@pytest.mark.parametrize("name", ["", "J", "  J  "])
def test_short_names_are_rejected(name: str) -> None:
    result = validate_draft(RegistrationDraft(**{**VALID_FIELDS, "full_name": name}))

    assert result.field_errors == {"full_name": "Name must be at least 2 characters"}


@pytest.mark.parametrize(
    "email",
    ["jane", "jane@example", "@example.com", "jane@@example.com", "ja ne@example.com"],
)
def test_malformed_emails_are_rejected(email: str) -> None:
    result = validate_draft(RegistrationDraft(**{**VALID_FIELDS, "email": email}))

    assert result.field_errors == {"email": "Valid email required"}


@pytest.mark.parametrize(
    "phone",
    ["", "0123456", "+0123", "12345678901234567", "555-CALL", "++15551234"],
)
def test_malformed_phones_are_rejected(phone: str) -> None:
    result = validate_draft(RegistrationDraft(**{**VALID_FIELDS, "phone": phone}))

    assert result.field_errors == {"phone": "Valid phone number required"}


@pytest.mark.parametrize(
    "phone", ["(555) 123-4567", "+1 555 123 4567", "7", "1234567890123456"]
)
def test_formatted_phones_are_accepted(phone: str) -> None:
    result = validate_draft(RegistrationDraft(**{**VALID_FIELDS, "phone": phone}))

    assert result.valid


def test_missing_topic_is_rejected() -> None:
    result = validate_draft(RegistrationDraft(**{**VALID_FIELDS, "seminar_topic": ""}))

    assert result.field_errors == {"seminar_topic": "Please select seminar topic"}


def test_optional_fields_are_unconstrained() -> None:
    draft = RegistrationDraft(
        **VALID_FIELDS, company="", position="x", dietary_requirements="", comments=""
    )

    assert validate_draft(draft).valid


def test_clean_phone_strips_separators() -> None:
    assert clean_phone(" +1 (555) 123-4567 ") == "+15551234567"
