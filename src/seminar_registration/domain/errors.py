"""Error taxonomy for the registration station."""

from enum import Enum


class RegistrationError(Exception):
    """Base class for failures surfaced to the attendee."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsupportedDeviceError(RegistrationError):
    """Camera capture is not available on this host."""

    def __init__(
        self, message: str = "This device doesn't support camera access."
    ) -> None:
        super().__init__(message)


class DeviceErrorKind(str, Enum):
    """Named media device failures."""

    NOT_ALLOWED = "NotAllowedError"
    NOT_FOUND = "NotFoundError"
    NOT_SUPPORTED = "NotSupportedError"
    NOT_READABLE = "NotReadableError"
    OTHER = "Error"

    @classmethod
    def from_name(cls, name: str) -> "DeviceErrorKind":
        """Return the kind for a device error name, falling back to OTHER."""
        for kind in cls:
            if kind.value == name:
                return kind
        return cls.OTHER


class MediaDeviceError(Exception):
    """Raised by media collaborators with a named device failure."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.message = message


class CameraDeviceError(RegistrationError):
    """The camera could not be acquired."""

    def __init__(self, kind: DeviceErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class CameraPlaybackError(RegistrationError):
    """A granted stream failed to start playing."""


class CameraCaptureError(RegistrationError):
    """A frame could not be grabbed or encoded."""


class NoActiveCameraError(RegistrationError):
    """Capture was requested without an active camera session."""

    def __init__(self, message: str = "Please start the camera first!") -> None:
        super().__init__(message)


class RegistrationValidationError(RegistrationError):
    """The draft failed one or more field rules."""

    def __init__(self, field_errors: dict[str, str]) -> None:
        super().__init__("Please correct the highlighted fields")
        self.field_errors = field_errors


class MissingPhotoError(RegistrationError):
    """Submit was attempted without a captured profile photo."""

    def __init__(
        self, message: str = "Please capture a profile photo before submitting!"
    ) -> None:
        super().__init__(message)


class RegistrationSubmitError(RegistrationError):
    """The remote insert was rejected or returned an error payload."""
