"""Camera session lifecycle: acquire, play, capture, release."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from seminar_registration.domain.errors import (
    CameraCaptureError,
    CameraDeviceError,
    CameraPlaybackError,
    DeviceErrorKind,
    MediaDeviceError,
    NoActiveCameraError,
    UnsupportedDeviceError,
)

_logger = logging.getLogger(__name__)

DEVICE_ERROR_MESSAGES: dict[DeviceErrorKind, str | None] = {
    DeviceErrorKind.NOT_ALLOWED: "Please allow camera access",
    DeviceErrorKind.NOT_FOUND: "No camera found",
    DeviceErrorKind.NOT_SUPPORTED: "Device doesn't support camera",
    DeviceErrorKind.NOT_READABLE: "Camera in use by another app",
    DeviceErrorKind.OTHER: None,
}


@dataclass(frozen=True)
class MediaConstraints:
    """Requested video stream parameters."""

    width: int = 640
    height: int = 480
    facing_mode: str = "user"
    audio: bool = False


class MediaStream(Protocol):
    """Live stream handle owned by the session manager."""

    def stop_tracks(self) -> None:
        """Stop every track of the stream."""


class MediaDevices(Protocol):
    """Interface for acquiring camera streams."""

    def is_supported(self) -> bool:
        """Return whether the host can capture video at all."""

    async def get_user_media(self, constraints: MediaConstraints) -> MediaStream:
        """Acquire a stream or raise MediaDeviceError."""


class VideoSurface(Protocol):
    """Live video surface bound to the current stream."""

    def attach(self, stream: MediaStream | None) -> None:
        """Bind a stream, or detach when given None."""

    async def play(self) -> None:
        """Start playback of the attached stream."""

    def grab_frame(self) -> object:
        """Return the current frame at its native resolution."""


class FrameEncoder(Protocol):
    """Encodes a raw frame into a lossy data URI."""

    def encode(self, frame: object, quality: float) -> str:
        """Return the frame as a `data:image/jpeg;base64,...` string."""


def device_error_message(error: MediaDeviceError) -> tuple[DeviceErrorKind, str]:
    """Map a named device failure to its user-facing message."""
    kind = DeviceErrorKind.from_name(error.name)
    detail = DEVICE_ERROR_MESSAGES[kind] or error.message
    return kind, f"Camera error: {detail}"


@dataclass
class CameraSessionManager:
    """Owns at most one camera stream at a time."""

    media_devices: MediaDevices
    surface: VideoSurface
    encoder: FrameEncoder
    constraints: MediaConstraints = field(default_factory=MediaConstraints)
    quality: float = 0.8
    stream: MediaStream | None = None
    is_active: bool = False
    is_starting: bool = False
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)

    async def start(self) -> None:
        """Tear down any current session, then acquire and play a new one."""
        if not self.media_devices.is_supported():
            raise UnsupportedDeviceError()

        async with self._lock:
            self.stop()
            self.is_starting = True
            try:
                await self._acquire()
            finally:
                self.is_starting = False

    async def _acquire(self) -> None:
        _logger.info("Starting camera")
        try:
            stream = await self.media_devices.get_user_media(self.constraints)
        except MediaDeviceError as error:
            _logger.exception("Camera error")
            kind, message = device_error_message(error)
            raise CameraDeviceError(kind, message) from error

        self.stream = stream
        self.surface.attach(stream)
        try:
            await self.surface.play()
        except MediaDeviceError as error:
            _logger.exception("Error playing video")
            self.stop()
            kind, message = device_error_message(error)
            raise CameraDeviceError(kind, message) from error
        except Exception as error:
            _logger.exception("Error playing video")
            self.stop()
            raise CameraPlaybackError(f"Error starting video: {error}") from error
        # stop() may have run while playback was pending
        self.is_active = self.stream is stream

    def stop(self) -> bool:
        """Release the current stream; return whether one was held."""
        if self.stream is None:
            return False
        self.stream.stop_tracks()
        self.stream = None
        self.surface.attach(None)
        self.is_active = False
        _logger.info("Camera stopped")
        return True

    async def preview(self) -> str:
        """Encode the live frame for display without touching the draft."""
        if not self.is_active:
            raise NoActiveCameraError()
        try:
            return await asyncio.to_thread(self._grab_encoded)
        except Exception as error:
            raise CameraCaptureError("Error reading camera frame") from error

    async def capture(self) -> str:
        """Encode the current frame as a JPEG data URI."""
        if not self.is_active:
            raise NoActiveCameraError()
        try:
            return await asyncio.to_thread(self._grab_encoded)
        except Exception as error:
            _logger.exception("Capture error")
            raise CameraCaptureError("Error capturing photo") from error

    def _grab_encoded(self) -> str:
        return self.encoder.encode(self.surface.grab_frame(), self.quality)
