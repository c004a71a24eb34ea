"""Transformation pipeline from captured frame to finished photo."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from photobooth.domain.photos import PhotoRecord
from photobooth.services.session import PhotoSession

logger = logging.getLogger(__name__)

FAILED_MESSAGE = "Transformation failed"
TIMED_OUT_MESSAGE = "Transformation timed out"
CANCELLED_MESSAGE = "Transformation cancelled"


class TransformClient(Protocol):
    """Interface for the generative image model."""

    async def transform(
        self, *, model: str, instruction: str, input_image: bytes
    ) -> bytes:
        """Return the transformed image bytes."""


@dataclass(frozen=True)
class PendingTransform:
    """Handle for one in-flight transformation.

    The task resolves to the final record, or ``None`` when the photo was
    removed before its outcome arrived. It never raises for model errors.
    """

    photo_id: UUID
    task: "asyncio.Task[PhotoRecord | None]"


@dataclass
class TransformationPipeline:
    """Runs one image model call per captured photo and records the outcome.

    All store writes happen on the event loop that called ``snap``, so the
    store needs no locking.
    """

    client: TransformClient
    session: PhotoSession
    model: str
    timeout_seconds: float | None = None
    max_concurrency: int = 4
    debug_errors: bool = False
    _semaphore: asyncio.Semaphore = field(init=False, repr=False)
    _tasks: set[asyncio.Task] = field(init=False, repr=False, default_factory=set)

    def __post_init__(self) -> None:
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._semaphore = asyncio.Semaphore(self.max_concurrency)

    @property
    def in_flight(self) -> int:
        """Number of transformations that have not resolved yet."""
        return len(self._tasks)

    def snap(self, input_bytes: bytes) -> PendingTransform:
        """Capture a frame and start its transformation in the background."""
        loop = asyncio.get_running_loop()
        mode = self.session.active_mode
        custom_text = self.session.custom_instruction
        photo_id = self.session.store.capture(input_bytes, mode)
        instruction = self.session.registry.get_instruction(mode, custom_text)
        logger.info(
            "Photo captured", extra={"photo_id": photo_id, "mode": str(mode)}
        )
        task = loop.create_task(
            self._transform(photo_id, instruction, input_bytes),
            name=f"transform-{photo_id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return PendingTransform(photo_id=photo_id, task=task)

    async def wait_idle(self) -> None:
        """Wait until every in-flight transformation has resolved."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel in-flight transformations, marking their photos failed."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _transform(
        self, photo_id: UUID, instruction: str, input_bytes: bytes
    ) -> PhotoRecord | None:
        store = self.session.store
        try:
            async with self._semaphore:
                if store.get(photo_id) is None:
                    logger.info(
                        "Skipping transformation for removed photo",
                        extra={"photo_id": photo_id},
                    )
                    return None
                output = await self._call_model(instruction, input_bytes)
        except asyncio.CancelledError:
            store.fail(photo_id, CANCELLED_MESSAGE)
            raise
        except Exception as exc:
            logger.exception("Transformation failed", extra={"photo_id": photo_id})
            return store.fail(photo_id, self._failure_reason(exc))
        record = store.complete(photo_id, output)
        if record is not None:
            logger.info("Photo transformed", extra={"photo_id": photo_id})
        return record

    async def _call_model(self, instruction: str, input_bytes: bytes) -> bytes:
        call = self.client.transform(
            model=self.model, instruction=instruction, input_image=input_bytes
        )
        if self.timeout_seconds is None:
            output = await call
        else:
            output = await asyncio.wait_for(call, timeout=self.timeout_seconds)
        if not output:
            raise RuntimeError("Image model returned no image")
        return output

    def _failure_reason(self, exc: Exception) -> str:
        """Return a user-facing failure message, with detail when debugging."""
        fallback = FAILED_MESSAGE
        if isinstance(exc, TimeoutError):
            fallback = TIMED_OUT_MESSAGE
        if self.debug_errors:
            detail = f"{type(exc).__name__}: {exc}".strip()
            if detail:
                return f"{fallback} (debug: {detail})"
        return fallback
