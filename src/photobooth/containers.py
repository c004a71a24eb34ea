"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from photobooth.adapters.openai_image_client import OpenAIImageClient
from photobooth.config import Settings
from photobooth.services.modes import ModeRegistry
from photobooth.services.photos import PhotoStore
from photobooth.services.pipeline import TransformationPipeline
from photobooth.services.session import PhotoSession


@dataclass
class AppContainer:
    """Holds session-wide dependencies."""

    settings: Settings
    mode_registry: ModeRegistry
    session: PhotoSession
    pipeline: TransformationPipeline
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    mode_registry = ModeRegistry()
    session = PhotoSession(
        registry=mode_registry,
        store=PhotoStore(),
        default_mode=resolved_settings.default_mode,
    )
    image_client = OpenAIImageClient.create(resolved_settings.openai_api_key)
    pipeline = TransformationPipeline(
        client=image_client,
        session=session,
        model=resolved_settings.openai_image_model,
        timeout_seconds=resolved_settings.transform_timeout_seconds,
        max_concurrency=resolved_settings.max_concurrent_transforms,
        debug_errors=resolved_settings.debug_errors,
    )

    async def close_resources() -> None:
        await pipeline.aclose()
        await image_client.close()

    return AppContainer(
        settings=resolved_settings,
        mode_registry=mode_registry,
        session=session,
        pipeline=pipeline,
        close_resources=close_resources,
    )
