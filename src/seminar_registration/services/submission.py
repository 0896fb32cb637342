"""Submission of a validated draft to the remote datastore."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from seminar_registration.domain.errors import (
    MissingPhotoError,
    RegistrationSubmitError,
    RegistrationValidationError,
)
from seminar_registration.domain.registration import RegistrationDraft
from seminar_registration.services.validation import validate_draft

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsertResult:
    """Outcome of a remote insert: rows on success, an error payload otherwise."""

    data: list[dict[str, object]] | None = None
    error: dict[str, object] | None = None


class RegistrationRepository(Protocol):
    """Persistence interface for registration rows."""

    def insert(self, table: str, record: dict[str, object]) -> InsertResult:
        """Insert one record and report the outcome."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SubmissionService:
    """Validates a draft and performs exactly one remote insert."""

    repository: RegistrationRepository
    table: str = "registrations"
    clock: Callable[[], datetime] = field(default=_utc_now)

    async def submit(self, draft: RegistrationDraft) -> list[dict[str, object]] | None:
        """Insert the draft, returning the stored rows if the backend sent any."""
        result = validate_draft(draft)
        if not result.valid:
            raise RegistrationValidationError(result.field_errors)
        if not draft.profile_photo:
            raise MissingPhotoError()

        record = draft.to_record(self.clock())
        try:
            outcome = await asyncio.to_thread(self.repository.insert, self.table, record)
        except Exception as error:
            _logger.exception("Submit error")
            raise RegistrationSubmitError(str(error)) from error

        if outcome.error is not None:
            message = str(outcome.error.get("message", "Unknown error"))
            _logger.error("Registration insert rejected: %s", message)
            raise RegistrationSubmitError(message)

        _logger.info("Registration stored in %s", self.table)
        return outcome.data
