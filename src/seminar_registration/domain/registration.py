"""Domain models for attendee registration."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

DRAFT_TEXT_FIELDS = (
    "full_name",
    "email",
    "phone",
    "company",
    "position",
    "seminar_topic",
    "dietary_requirements",
    "comments",
)

_TRIMMED_FIELDS = {"full_name", "email", "phone", "company", "position", "comments"}


@dataclass
class RegistrationDraft:
    """In-memory registration record for one form-fill cycle."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    company: str = ""
    position: str = ""
    seminar_topic: str = ""
    dietary_requirements: str = ""
    comments: str = ""
    profile_photo: str | None = None

    def to_record(self, registration_date: datetime) -> dict[str, object]:
        """Serialize the draft into a `registrations` row."""
        record: dict[str, object] = {}
        for name in DRAFT_TEXT_FIELDS:
            value = getattr(self, name)
            record[name] = value.strip() if name in _TRIMMED_FIELDS else value
        record["profile_photo"] = self.profile_photo
        record["registration_date"] = registration_date.isoformat()
        return record

    def field_values(self) -> dict[str, str]:
        """Return the editable text fields."""
        return {name: getattr(self, name) for name in DRAFT_TEXT_FIELDS}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a draft."""

    valid: bool
    field_errors: dict[str, str] = field(default_factory=dict)


class BannerVariant(str, Enum):
    """Visual variants of the status banner."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Banner:
    """Global status message; a missing variant means hidden."""

    message: str = ""
    variant: BannerVariant | None = None

    @property
    def visible(self) -> bool:
        return self.variant is not None


class Phase(str, Enum):
    """Controller-level state derived from camera, photo and submit flags."""

    IDLE = "idle"
    CAMERA_STARTING = "camera_starting"
    CAMERA_ACTIVE = "camera_active"
    PHOTO_CAPTURED = "photo_captured"
    SUBMITTING = "submitting"


@dataclass(frozen=True)
class ControllerView:
    """Rendered UI state returned after every controller action."""

    phase: Phase
    start_enabled: bool
    stop_enabled: bool
    capture_enabled: bool
    submit_enabled: bool
    submit_label: str
    banner: Banner
    field_errors: dict[str, str]
    fields: dict[str, str]
    photo: str | None
