"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from seminar_registration.adapters.opencv_camera import (
    JpegFrameEncoder,
    OpenCvMediaDevices,
    OpenCvVideoSurface,
)
from seminar_registration.adapters.supabase_registration_repository import (
    SupabaseRegistrationRepository,
)
from seminar_registration.config import Settings
from seminar_registration.services.camera import CameraSessionManager, MediaConstraints
from seminar_registration.services.controller import RegistrationController
from seminar_registration.services.submission import SubmissionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    controller: RegistrationController
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    camera = CameraSessionManager(
        media_devices=OpenCvMediaDevices(
            device_index=resolved_settings.camera_device_index
        ),
        surface=OpenCvVideoSurface(),
        encoder=JpegFrameEncoder(),
        constraints=MediaConstraints(
            width=resolved_settings.camera_width,
            height=resolved_settings.camera_height,
            facing_mode=resolved_settings.camera_facing_mode,
        ),
        quality=resolved_settings.photo_quality,
    )
    submission = SubmissionService(
        repository=SupabaseRegistrationRepository(supabase_client),
        table=resolved_settings.registrations_table,
    )
    controller = RegistrationController(camera=camera, submission=submission)

    async def close_resources() -> None:
        camera.stop()

    return AppContainer(
        settings=resolved_settings,
        controller=controller,
        close_resources=close_resources,
    )
