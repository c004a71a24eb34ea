"""Shared test fixtures."""

import asyncio
import base64
from dataclasses import dataclass, field

import pytest

from photobooth.config import Settings
from photobooth.containers import AppContainer
from photobooth.services.images import detect_mime_type
from photobooth.services.modes import ModeRegistry
from photobooth.services.photos import PhotoStore
from photobooth.services.pipeline import TransformationPipeline, TransformClient
from photobooth.services.session import PhotoSession

JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"jpeg-frame"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"png-output"


def to_data_url(image_bytes: bytes) -> str:
    """Encode bytes the way a browser canvas export does."""
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{detect_mime_type(image_bytes)};base64,{encoded}"


@dataclass
class TransformCall:
    """A transformation request captured by a fake client."""

    model: str
    instruction: str
    input_image: bytes
    future: "asyncio.Future[bytes] | None" = None


@dataclass
class FakeTransformClient(TransformClient):
    """Fake image client that answers immediately."""

    output: bytes = PNG_BYTES
    calls: list[TransformCall] = field(default_factory=list)

    async def transform(
        self, *, model: str, instruction: str, input_image: bytes
    ) -> bytes:
        self.calls.append(TransformCall(model, instruction, input_image))
        return self.output


@dataclass
class FailingTransformClient(TransformClient):
    """Fake image client that always raises."""

    error: Exception = field(default_factory=lambda: RuntimeError("model overloaded"))

    async def transform(
        self, *, model: str, instruction: str, input_image: bytes
    ) -> bytes:
        raise self.error


@dataclass
class ControlledTransformClient(TransformClient):
    """Fake image client whose calls are resolved by the test."""

    calls: list[TransformCall] = field(default_factory=list)
    active: int = 0
    peak: int = 0

    async def transform(
        self, *, model: str, instruction: str, input_image: bytes
    ) -> bytes:
        future: asyncio.Future[bytes] = asyncio.get_running_loop().create_future()
        self.calls.append(TransformCall(model, instruction, input_image, future))
        self.active += 1
        self.peak = max(self.peak, self.active)
        try:
            return await future
        finally:
            self.active -= 1

    def resolve(self, index: int, output: bytes) -> None:
        future = self.calls[index].future
        assert future is not None
        future.set_result(output)

    def reject(self, index: int, error: Exception) -> None:
        future = self.calls[index].future
        assert future is not None
        future.set_exception(error)


async def settle() -> None:
    """Let scheduled tasks run until they block."""
    for _ in range(10):
        await asyncio.sleep(0)


def build_pipeline(
    client: TransformClient,
    session: PhotoSession | None = None,
    **kwargs: object,
) -> TransformationPipeline:
    return TransformationPipeline(
        client=client,
        session=session or PhotoSession(),
        model="test-image-model",
        **kwargs,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key", environment="test")


@pytest.fixture
def store() -> PhotoStore:
    return PhotoStore()


@pytest.fixture
def session() -> PhotoSession:
    return PhotoSession()


@pytest.fixture
def transform_client() -> FakeTransformClient:
    return FakeTransformClient()


@pytest.fixture
def container(
    settings: Settings, transform_client: FakeTransformClient
) -> AppContainer:
    mode_registry = ModeRegistry()
    session = PhotoSession(registry=mode_registry, default_mode=settings.default_mode)
    pipeline = TransformationPipeline(
        client=transform_client,
        session=session,
        model=settings.openai_image_model,
        timeout_seconds=settings.transform_timeout_seconds,
        max_concurrency=settings.max_concurrent_transforms,
        debug_errors=settings.debug_errors,
    )

    async def close_resources() -> None:
        await pipeline.aclose()

    return AppContainer(
        settings=settings,
        mode_registry=mode_registry,
        session=session,
        pipeline=pipeline,
        close_resources=close_resources,
    )
