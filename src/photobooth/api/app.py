"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from photobooth.api.models import (
    CustomInstructionRequest,
    ModeResponse,
    SessionResponse,
    SetModeRequest,
)
from photobooth.api.photos import router as photos_router
from photobooth.app_logging import configure_logging
from photobooth.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Photobooth ready",
            extra={"mode": str(app.state.container.session.active_mode)},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(photos_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/modes")
    async def list_modes(request: Request) -> dict[str, list[ModeResponse]]:
        """Return the selectable modes, custom slot first."""
        state_container: AppContainer = request.app.state.container
        modes = state_container.mode_registry.list_modes(
            state_container.session.custom_instruction
        )
        return {"modes": [ModeResponse.from_mode(mode) for mode in modes]}

    @app.get("/session")
    async def get_session(request: Request) -> SessionResponse:
        """Return the active mode and custom instruction."""
        return _session_response(request.app.state.container)

    @app.put("/session/mode")
    async def set_mode(payload: SetModeRequest, request: Request) -> SessionResponse:
        """Select the mode used for the next captures."""
        state_container: AppContainer = request.app.state.container
        state_container.session.set_mode(payload.mode)
        return _session_response(state_container)

    @app.put("/session/custom-instruction")
    async def set_custom_instruction(
        payload: CustomInstructionRequest, request: Request
    ) -> SessionResponse:
        """Replace the custom instruction text."""
        state_container: AppContainer = request.app.state.container
        state_container.session.set_custom_instruction(payload.text)
        return _session_response(state_container)

    @app.post("/session/custom-instruction/close")
    async def close_custom_instruction(request: Request) -> SessionResponse:
        """Close the custom editor, leaving custom mode if it is blank."""
        state_container: AppContainer = request.app.state.container
        state_container.session.close_custom_editor()
        return _session_response(state_container)

    return app


def _session_response(container: AppContainer) -> SessionResponse:
    session = container.session
    return SessionResponse(
        active_mode=session.active_mode,
        custom_instruction=session.custom_instruction,
        in_flight=container.pipeline.in_flight,
    )
