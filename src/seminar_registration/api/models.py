"""Pydantic models for the registration API."""

from pydantic import BaseModel

from seminar_registration.domain.registration import ControllerView


class RegistrationFields(BaseModel):
    """Editable form fields; omitted fields keep their current value."""

    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    position: str | None = None
    seminar_topic: str | None = None
    dietary_requirements: str | None = None
    comments: str | None = None

    def provided(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)


class BannerPayload(BaseModel):
    """Status banner payload."""

    message: str
    variant: str | None


class ButtonsPayload(BaseModel):
    """Enabled state of each control."""

    start: bool
    stop: bool
    capture: bool
    submit: bool
    submit_label: str


class ViewPayload(BaseModel):
    """Rendered controller state."""

    phase: str
    buttons: ButtonsPayload
    banner: BannerPayload
    field_errors: dict[str, str]
    form: dict[str, str]
    photo: str | None

    @classmethod
    def from_view(cls, view: ControllerView) -> "ViewPayload":
        variant = view.banner.variant
        return cls(
            phase=view.phase.value,
            buttons=ButtonsPayload(
                start=view.start_enabled,
                stop=view.stop_enabled,
                capture=view.capture_enabled,
                submit=view.submit_enabled,
                submit_label=view.submit_label,
            ),
            banner=BannerPayload(
                message=view.banner.message,
                variant=variant.value if variant is not None else None,
            ),
            field_errors=view.field_errors,
            form=view.fields,
            photo=view.photo,
        )
