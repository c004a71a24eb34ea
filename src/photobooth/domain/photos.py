"""Domain models for captured photos."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID

from photobooth.domain.modes import ModeKey


class PhotoStatus(StrEnum):
    """Processing status of a captured photo."""

    BUSY = "busy"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class PhotoRecord:
    """Status entry for one captured frame."""

    id: UUID
    mode: ModeKey
    status: PhotoStatus = PhotoStatus.BUSY
    error: str | None = None

    @property
    def is_busy(self) -> bool:
        return self.status is PhotoStatus.BUSY
