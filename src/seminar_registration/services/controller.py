"""Registration controller: the capture-and-submit state machine."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from seminar_registration.domain.errors import (
    MissingPhotoError,
    RegistrationError,
    RegistrationSubmitError,
    RegistrationValidationError,
)
from seminar_registration.domain.registration import (
    DRAFT_TEXT_FIELDS,
    Banner,
    BannerVariant,
    ControllerView,
    Phase,
    RegistrationDraft,
)
from seminar_registration.services.camera import CameraSessionManager
from seminar_registration.services.submission import SubmissionService

_logger = logging.getLogger(__name__)

SUBMIT_LABEL = "Register"
SUBMIT_BUSY_LABEL = "Registering..."


class ControllerAction(str, Enum):
    """Named UI triggers dispatched into the controller."""

    START_CAMERA = "start_camera"
    STOP_CAMERA = "stop_camera"
    CAPTURE_PHOTO = "capture_photo"
    SUBMIT = "submit"
    RESET = "reset"


@dataclass
class RegistrationController:
    """Owns the draft, the camera session and the banner for one station."""

    camera: CameraSessionManager
    submission: SubmissionService
    draft: RegistrationDraft = field(default_factory=RegistrationDraft)
    banner: Banner = field(default_factory=Banner)
    field_errors: dict[str, str] = field(default_factory=dict)
    is_submitting: bool = False
    submit_label: str = SUBMIT_LABEL

    async def dispatch(self, action: ControllerAction) -> ControllerView:
        """Run the handler for a UI trigger and return the new view."""
        if action is ControllerAction.START_CAMERA:
            await self.start_camera()
        elif action is ControllerAction.STOP_CAMERA:
            self.stop_camera()
        elif action is ControllerAction.CAPTURE_PHOTO:
            await self.capture_photo()
        elif action is ControllerAction.SUBMIT:
            await self.submit()
        elif action is ControllerAction.RESET:
            self.reset()
        return self.view()

    def update_fields(self, **values: str) -> ControllerView:
        """Apply edited form values to the draft."""
        unknown = set(values) - set(DRAFT_TEXT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown registration fields: {sorted(unknown)}")
        for name, value in values.items():
            setattr(self.draft, name, value)
        return self.view()

    async def start_camera(self) -> None:
        try:
            await self.camera.start()
        except RegistrationError as error:
            self._show(error.message, BannerVariant.ERROR)
            return
        if self.camera.is_active:
            self._show("Camera started successfully!", BannerVariant.SUCCESS)

    def stop_camera(self) -> None:
        if self.camera.stop():
            self._show("Camera stopped", BannerVariant.SUCCESS)

    async def capture_photo(self) -> None:
        try:
            photo = await self.camera.capture()
        except RegistrationError as error:
            self._show(error.message, BannerVariant.ERROR)
            return
        self.draft.profile_photo = photo
        self._show("Photo captured!", BannerVariant.SUCCESS)

    async def submit(self) -> None:
        """Validate and submit the draft; the busy state never outlives the call.

        A submit arriving while another is in flight is ignored. On success the
        form is reset first and the success banner is set afterwards, so the
        returned view still carries it; an explicit reset leaves it neutral.
        """
        if self.is_submitting:
            return
        self.field_errors = {}
        self.is_submitting = True
        self.submit_label = SUBMIT_BUSY_LABEL
        try:
            await self.submission.submit(self.draft)
        except RegistrationValidationError as error:
            self.field_errors = dict(error.field_errors)
            return
        except MissingPhotoError as error:
            self._show(error.message, BannerVariant.ERROR)
            return
        except RegistrationSubmitError as error:
            self._show(f"Registration failed: {error.message}", BannerVariant.ERROR)
            return
        finally:
            self.is_submitting = False
            self.submit_label = SUBMIT_LABEL

        self.reset()
        self._show(
            "Registration successful! Thank you for registering.",
            BannerVariant.SUCCESS,
        )

    def reset(self) -> None:
        """Discard the draft, stop the camera and clear every message."""
        self.draft = RegistrationDraft()
        self.field_errors = {}
        self.camera.stop()
        self.banner = Banner()

    def phase(self) -> Phase:
        if self.is_submitting:
            return Phase.SUBMITTING
        if self.camera.is_starting:
            return Phase.CAMERA_STARTING
        if self.camera.is_active:
            if self.draft.profile_photo:
                return Phase.PHOTO_CAPTURED
            return Phase.CAMERA_ACTIVE
        return Phase.IDLE

    def view(self) -> ControllerView:
        """Render the derived UI state."""
        active = self.camera.is_active
        return ControllerView(
            phase=self.phase(),
            start_enabled=not active,
            stop_enabled=active,
            capture_enabled=active,
            submit_enabled=not self.is_submitting,
            submit_label=self.submit_label,
            banner=self.banner,
            field_errors=dict(self.field_errors),
            fields=self.draft.field_values(),
            photo=self.draft.profile_photo,
        )

    def _show(self, message: str, variant: BannerVariant) -> None:
        if variant is BannerVariant.ERROR:
            _logger.warning("Banner: %s", message)
        self.banner = Banner(message=message, variant=variant)
