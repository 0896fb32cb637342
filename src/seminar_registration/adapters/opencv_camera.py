"""OpenCV-backed camera collaborators."""

import asyncio
import base64
import logging
from dataclasses import dataclass, field

import cv2
import numpy as np

from seminar_registration.domain.errors import MediaDeviceError
from seminar_registration.services.camera import MediaConstraints

_logger = logging.getLogger(__name__)


@dataclass
class OpenCvStream:
    """A VideoCapture handle acting as the live stream."""

    capture: cv2.VideoCapture

    def stop_tracks(self) -> None:
        """Release the capture device."""
        self.capture.release()

    def read(self) -> np.ndarray:
        ok, frame = self.capture.read()
        if not ok or frame is None:
            raise RuntimeError("Camera returned no frame")
        return frame


@dataclass
class OpenCvMediaDevices:
    """Acquires local cameras through OpenCV."""

    device_index: int = 0

    def is_supported(self) -> bool:
        """Return whether OpenCV was built with any camera backend."""
        return bool(cv2.videoio_registry.getCameraBackends())

    async def get_user_media(self, constraints: MediaConstraints) -> OpenCvStream:
        """Open the camera at the preferred resolution."""
        if constraints.audio:
            raise MediaDeviceError("NotSupportedError", "Audio capture is unsupported")
        return await asyncio.to_thread(self._open, constraints)

    def _open(self, constraints: MediaConstraints) -> OpenCvStream:
        capture = cv2.VideoCapture(self.device_index)
        if not capture.isOpened():
            capture.release()
            raise MediaDeviceError(
                "NotFoundError", f"Cannot open camera {self.device_index}"
            )
        capture.set(cv2.CAP_PROP_FRAME_WIDTH, constraints.width)
        capture.set(cv2.CAP_PROP_FRAME_HEIGHT, constraints.height)
        _logger.info(
            "Camera %s opened: %sx%s",
            self.device_index,
            int(capture.get(cv2.CAP_PROP_FRAME_WIDTH)),
            int(capture.get(cv2.CAP_PROP_FRAME_HEIGHT)),
        )
        return OpenCvStream(capture=capture)


@dataclass
class OpenCvVideoSurface:
    """Holds the attached stream and its most recent frame."""

    stream: OpenCvStream | None = None
    last_frame: np.ndarray | None = field(default=None, repr=False)

    def attach(self, stream: OpenCvStream | None) -> None:
        """Bind or detach the live stream."""
        self.stream = stream
        self.last_frame = None

    async def play(self) -> None:
        """Read a first frame; a stream that yields none is unplayable."""
        if self.stream is None:
            raise RuntimeError("No stream attached")
        try:
            self.last_frame = await asyncio.to_thread(self.stream.read)
        except RuntimeError as error:
            raise MediaDeviceError("NotReadableError", str(error)) from error

    def grab_frame(self) -> np.ndarray:
        """Read the current frame at the stream's native resolution."""
        if self.stream is None:
            raise RuntimeError("No stream attached")
        self.last_frame = self.stream.read()
        return self.last_frame


@dataclass(frozen=True)
class JpegFrameEncoder:
    """Encodes frames to JPEG data URIs."""

    def encode(self, frame: np.ndarray, quality: float) -> str:
        """Encode a frame at a 0..1 quality into a data URI."""
        encoded = base64.b64encode(self.encode_bytes(frame, quality)).decode("utf-8")
        return f"data:image/jpeg;base64,{encoded}"

    def encode_bytes(self, frame: np.ndarray, quality: float) -> bytes:
        ok, buffer = cv2.imencode(
            ".jpg", frame, [cv2.IMWRITE_JPEG_QUALITY, round(quality * 100)]
        )
        if not ok:
            raise RuntimeError("JPEG encoding failed")
        return buffer.tobytes()
