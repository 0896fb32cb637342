"""Form field rules for a registration draft."""

import re

from seminar_registration.domain.registration import RegistrationDraft, ValidationResult

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_PATTERN = re.compile(r"\+?[1-9][0-9]{0,15}")
_PHONE_SEPARATORS = re.compile(r"[\s\-()]")

MIN_NAME_LENGTH = 2


def validate_draft(draft: RegistrationDraft) -> ValidationResult:
    """Validate every required field and collect one message per failure."""
    errors: dict[str, str] = {}

    if len(draft.full_name.strip()) < MIN_NAME_LENGTH:
        errors["full_name"] = "Name must be at least 2 characters"

    if not _EMAIL_PATTERN.fullmatch(draft.email.strip()):
        errors["email"] = "Valid email required"

    if not _PHONE_PATTERN.fullmatch(clean_phone(draft.phone)):
        errors["phone"] = "Valid phone number required"

    if not draft.seminar_topic:
        errors["seminar_topic"] = "Please select seminar topic"

    return ValidationResult(valid=not errors, field_errors=errors)


def clean_phone(raw: str) -> str:
    """Strip whitespace, hyphens and parentheses from a phone number."""
    return _PHONE_SEPARATORS.sub("", raw.strip())
