"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from seminar_registration.api.models import RegistrationFields, ViewPayload
from seminar_registration.api.ui import router as ui_router
from seminar_registration.app_logging import configure_logging
from seminar_registration.containers import AppContainer
from seminar_registration.domain.errors import NoActiveCameraError, RegistrationError
from seminar_registration.services.controller import (
    ControllerAction,
    RegistrationController,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()
        logger.info("Registration station shut down")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(ui_router)

    def _controller(request: Request) -> RegistrationController:
        state_container: AppContainer = request.app.state.container
        return state_container.controller

    async def _dispatch(request: Request, action: ControllerAction) -> ViewPayload:
        view = await _controller(request).dispatch(action)
        return ViewPayload.from_view(view)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/registration")
    async def registration_view(request: Request) -> ViewPayload:
        """Return the current form state."""
        return ViewPayload.from_view(_controller(request).view())

    @app.patch("/registration/draft")
    async def update_draft(fields: RegistrationFields, request: Request) -> ViewPayload:
        """Apply edited form fields without submitting."""
        view = _controller(request).update_fields(**fields.provided())
        return ViewPayload.from_view(view)

    @app.post("/registration")
    async def submit_registration(
        fields: RegistrationFields, request: Request
    ) -> ViewPayload:
        """Apply the posted fields and submit the registration."""
        controller = _controller(request)
        if controller.is_submitting:
            return ViewPayload.from_view(controller.view())
        controller.update_fields(**fields.provided())
        return await _dispatch(request, ControllerAction.SUBMIT)

    @app.post("/registration/reset")
    async def reset_registration(request: Request) -> ViewPayload:
        """Discard the draft and stop the camera."""
        return await _dispatch(request, ControllerAction.RESET)

    @app.post("/camera/start")
    async def start_camera(request: Request) -> ViewPayload:
        """Acquire the camera and start playback."""
        return await _dispatch(request, ControllerAction.START_CAMERA)

    @app.post("/camera/stop")
    async def stop_camera(request: Request) -> ViewPayload:
        """Release the camera."""
        return await _dispatch(request, ControllerAction.STOP_CAMERA)

    @app.post("/camera/capture")
    async def capture_photo(request: Request) -> ViewPayload:
        """Freeze the current frame as the profile photo."""
        return await _dispatch(request, ControllerAction.CAPTURE_PHOTO)

    @app.get("/camera/preview")
    async def camera_preview(request: Request) -> dict[str, str]:
        """Return the live frame as a data URI."""
        try:
            frame = await _controller(request).camera.preview()
        except NoActiveCameraError as error:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=error.message
            ) from error
        except RegistrationError as error:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=error.message
            ) from error
        return {"frame": frame}

    return app
