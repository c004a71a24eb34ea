"""Tests for container wiring."""

import asyncio

from photobooth.containers import build_container
from photobooth.domain.modes import ModeKey


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.pipeline.session is container.session
    assert container.session.registry is container.mode_registry
    assert container.session.active_mode is ModeKey.CARTOON
    assert container.pipeline.model == settings.openai_image_model
    assert container.pipeline.max_concurrency == settings.max_concurrent_transforms
    asyncio.run(container.close_resources())
