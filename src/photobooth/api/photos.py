"""Photo endpoints: capture, snapshots, payloads and deletion."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, Response, status

from photobooth.api.models import PhotoResponse, SnapRequest
from photobooth.services.images import (
    decode_image_payload,
    detect_mime_type,
    file_extension,
)

if TYPE_CHECKING:
    from photobooth.containers import AppContainer

router = APIRouter(prefix="/photos", tags=["photos"])

DOWNLOAD_STEM = "photobooth"


@router.post("", status_code=status.HTTP_202_ACCEPTED)
async def snap_photo(
    payload: SnapRequest, request: Request, response: Response, wait: bool = False
) -> PhotoResponse:
    """Capture a frame and start its transformation."""
    container: AppContainer = request.app.state.container
    try:
        image_bytes = decode_image_payload(payload.image)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    pending = container.pipeline.snap(image_bytes)
    if wait:
        # A dropped request must not cancel the transformation itself.
        record = await asyncio.shield(pending.task)
        if record is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Photo was removed"
            )
        response.status_code = status.HTTP_200_OK
        return PhotoResponse.from_record(record)
    return _photo_or_404(container, pending.photo_id)


@router.get("")
async def list_photos(request: Request) -> dict[str, list[PhotoResponse]]:
    """Return every photo, newest first."""
    container: AppContainer = request.app.state.container
    records = container.session.store.list()
    return {"photos": [PhotoResponse.from_record(record) for record in records]}


@router.get("/{photo_id}")
async def get_photo(photo_id: UUID, request: Request) -> PhotoResponse:
    """Return a single photo snapshot."""
    container: AppContainer = request.app.state.container
    return _photo_or_404(container, photo_id)


@router.get("/{photo_id}/input")
async def get_photo_input(
    photo_id: UUID, request: Request, download: bool = False
) -> Response:
    """Return the captured frame."""
    container: AppContainer = request.app.state.container
    return _image_response(
        container.session.store.get_input(photo_id), download=download
    )


@router.get("/{photo_id}/output")
async def get_photo_output(
    photo_id: UUID, request: Request, download: bool = False
) -> Response:
    """Return the transformed image once it is available."""
    container: AppContainer = request.app.state.container
    return _image_response(
        container.session.store.get_output(photo_id), download=download
    )


@router.delete("/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_photo(photo_id: UUID, request: Request) -> None:
    """Remove a photo; an in-flight transformation result is discarded."""
    container: AppContainer = request.app.state.container
    if not container.session.store.remove(photo_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


def _photo_or_404(container: AppContainer, photo_id: UUID) -> PhotoResponse:
    record = container.session.store.get(photo_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return PhotoResponse.from_record(record)


def _image_response(image_bytes: bytes | None, *, download: bool) -> Response:
    if image_bytes is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Image not available"
        )
    mime_type = detect_mime_type(image_bytes)
    headers = {}
    if download:
        filename = f"{DOWNLOAD_STEM}.{file_extension(mime_type)}"
        headers["Content-Disposition"] = f'attachment; filename="{filename}"'
    return Response(content=image_bytes, media_type=mime_type, headers=headers)
