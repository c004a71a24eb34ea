"""Pydantic models for the photobooth HTTP API."""

from uuid import UUID

from pydantic import BaseModel, Field

from photobooth.domain.modes import Mode, ModeKey
from photobooth.domain.photos import PhotoRecord, PhotoStatus


class SnapRequest(BaseModel):
    """Captured frame as a data URL or bare base64 string."""

    image: str = Field(min_length=1)


class SetModeRequest(BaseModel):
    mode: ModeKey


class CustomInstructionRequest(BaseModel):
    text: str = ""


class ModeResponse(BaseModel):
    key: ModeKey
    display_name: str
    emoji: str
    instruction: str

    @classmethod
    def from_mode(cls, mode: Mode) -> "ModeResponse":
        return cls(
            key=mode.key,
            display_name=mode.display_name,
            emoji=mode.emoji,
            instruction=mode.instruction,
        )


class PhotoResponse(BaseModel):
    """Snapshot of one photo record."""

    id: UUID
    mode: ModeKey
    status: PhotoStatus
    is_busy: bool
    error: str | None = None

    @classmethod
    def from_record(cls, record: PhotoRecord) -> "PhotoResponse":
        return cls(
            id=record.id,
            mode=record.mode,
            status=record.status,
            is_busy=record.is_busy,
            error=record.error,
        )


class SessionResponse(BaseModel):
    active_mode: ModeKey
    custom_instruction: str
    in_flight: int
